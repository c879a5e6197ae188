"""Access to the HTML document being built.

The document is parsed from the template using Beautiful Soup, and mutated in
place by the decorators and the tag injector before being serialized.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Doctype, NavigableString, PreformattedString, Tag
from bs4.formatter import HTMLFormatter

from bundlehtml.errors import TemplateError

if TYPE_CHECKING:
    from collections.abc import Mapping


#: The doctype placed at the top of every generated document.
DOCTYPE = '<!doctype html>\n'

#: The text inserted before each new element, to keep the output readable.
SEPARATOR = '\n  '


class RawMarkup(PreformattedString):
    """Markup placed in the document verbatim.

    Unlike a normal string, this isn't escaped when the document is
    serialized.
    """

    PREFIX = ''
    SUFFIX = ''


class DocumentFormatter(HTMLFormatter):
    """Formatter for serializing generated documents.

    Attributes are written in the order they were set, void elements are
    written without a closing slash, and empty attributes (such as
    ``nomodule``) are written as bare boolean attributes.
    """

    def __init__(self) -> None:
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_xml,
            void_element_close_prefix=None,
            empty_attributes_are_booleans=True)

    def attributes(
        self,
        tag: Tag,
    ) -> List[Tuple[str, Optional[str]]]:
        """Return the attributes of a tag for serialization.

        Args:
            tag (bs4.element.Tag):
                The tag being serialized.

        Returns:
            list of tuple:
            The attribute names and values, in insertion order. Empty
            values are returned as ``None``, marking boolean attributes.
        """
        if tag.attrs is None:
            return []

        return [
            (key, None if value == '' else value)
            for key, value in tag.attrs.items()
        ]


class HTMLDocument:
    """An HTML document built from a template.

    This locates the ``<html>`` element of the template, creating empty
    ``<head>`` and ``<body>`` elements if the template lacks them, and
    provides the operations used to place new elements in the document.

    The template is parsed into a tree and serialized again, so the output
    isn't a byte-for-byte copy of the template. Character references other
    than ``&amp;``, ``&lt;`` and ``&gt;`` are written as the characters they
    stand for (``&nbsp;`` becomes U+00A0 and ``&copy;`` becomes ``©``), and
    void elements lose any closing slash (``<br/>`` becomes ``<br>``). The
    document is emitted as UTF-8, so its meaning is unchanged.

    Attributes:
        soup (bs4.BeautifulSoup):
            The parsed document.

        html (bs4.element.Tag):
            The ``<html>`` element.

        head (bs4.element.Tag):
            The ``<head>`` element.

        body (bs4.element.Tag):
            The ``<body>`` element.
    """

    def __init__(
        self,
        source: str,
    ) -> None:
        """Initialize the document.

        Args:
            source (str):
                The HTML source of the template.

        Raises:
            bundlehtml.errors.TemplateError:
                The template doesn't contain an ``<html>`` element.
        """
        self.soup = BeautifulSoup(source, 'html.parser',
                                  multi_valued_attributes=None)

        html = self.soup.find('html')

        if html is None:
            raise TemplateError(
                "The input template doesn't contain the `html` tag.")

        self.html: Tag = html
        self.head = self.get_or_create('head', append=False)
        self.body = self.get_or_create('body')

    def get_or_create(
        self,
        tag_name: str,
        append: bool = True,
    ) -> Tag:
        """Return an element in the document, creating it if needed.

        Args:
            tag_name (str):
                The name of the element.

            append (bool, optional):
                Whether a new element is added as the last child of
                ``<html>``. If ``False``, it's added as the first child.

        Returns:
            bs4.element.Tag:
            The existing or new element.
        """
        element = self.html.find(tag_name)

        if element is None:
            element = self.soup.new_tag(tag_name)

            if append:
                self.html.append(element)
            else:
                self.html.insert(0, element)

        return element

    def new_element(
        self,
        tag_name: str,
        attrs: Optional[Mapping[str, str]] = None,
    ) -> Tag:
        """Return a new element that isn't yet part of the document.

        Args:
            tag_name (str):
                The name of the element.

            attrs (dict, optional):
                The attributes of the element, in the order they should be
                written. An empty value is written as a boolean attribute,
                and a ``None`` value is left out.

        Returns:
            bs4.element.Tag:
            The new element.
        """
        return self.soup.new_tag(tag_name, attrs={
            key: value
            for key, value in (attrs or {}).items()
            if value is not None
        })

    def insert_with_separator(
        self,
        parent: Tag,
        node: Tag,
    ) -> None:
        """Append an element, preceded by a newline and indentation.

        Args:
            parent (bs4.element.Tag):
                The element to append to.

            node (bs4.element.Tag):
                The element to append.
        """
        parent.append(NavigableString(SEPARATOR))
        parent.append(node)

    def append_raw(
        self,
        parent: Tag,
        markup: str,
    ) -> None:
        """Append raw markup, followed by a newline and indentation.

        The markup is neither parsed nor escaped.

        Args:
            parent (bs4.element.Tag):
                The element to append to.

            markup (str):
                The markup to append.
        """
        parent.append(RawMarkup(markup))
        parent.append(NavigableString(SEPARATOR))

    def replace_or_append(
        self,
        parent: Tag,
        tag_name: str,
        predicate: Callable[[Tag], bool],
        factory: Callable[[], Tag],
    ) -> Tag:
        """Replace a matching element, or append a new one.

        The first ``tag_name`` element within ``parent`` that satisfies
        ``predicate`` is replaced in place by a new element. If none matches,
        the new element is appended to ``parent``.

        Args:
            parent (bs4.element.Tag):
                The element to search within.

            tag_name (str):
                The name of the elements to consider.

            predicate (callable):
                A function returning whether an existing element should be
                replaced.

            factory (callable):
                A function returning the new element.

        Returns:
            bs4.element.Tag:
            The new element.
        """
        new_node = factory()

        for node in parent.find_all(tag_name):
            if predicate(node):
                node.replace_with(new_node)
                break
        else:
            self.insert_with_separator(parent, new_node)

        return new_node

    def serialize(self) -> str:
        """Return the serialized document.

        Any doctype in the template is replaced with the standard HTML5
        doctype.

        Returns:
            str:
            The HTML for the document.
        """
        for node in list(self.soup.contents):
            if isinstance(node, Doctype):
                node.extract()

        markup = self.soup.decode(formatter=DocumentFormatter())

        return DOCTYPE + markup.lstrip()