"""Static decorations applied to the document's ``<head>``.

Each decoration replaces an existing element of the same kind where there is
one, so applying a decoration twice leaves the document unchanged.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from bs4.element import Tag

    from bundlehtml.document import HTMLDocument


#: The ``rel`` value of the favicon link.
FAVICON_REL = 'shortcut icon'


def apply_meta(
    document: HTMLDocument,
    meta: Mapping[str, str],
) -> None:
    """Set ``<meta>`` elements in the document's ``<head>``.

    Args:
        document (bundlehtml.document.HTMLDocument):
            The document to decorate.

        meta (dict):
            A mapping of ``name`` attributes to ``content`` attributes.
            New elements are appended in mapping order.
    """
    for name, content in meta.items():
        document.replace_or_append(
            document.head,
            'meta',
            lambda node: node.get('name') == name,
            lambda: document.new_element('meta', {
                'name': name,
                'content': content,
            }))


def apply_favicon_markers(
    document: HTMLDocument,
    markers: Iterable[str],
) -> None:
    """Append markup from a favicon generator to the document's ``<head>``.

    Args:
        document (bundlehtml.document.HTMLDocument):
            The document to decorate.

        markers (iterable of str):
            The markup to append verbatim.
    """
    for marker in markers:
        document.append_raw(document.head, marker)


def apply_title(
    document: HTMLDocument,
    title: str,
) -> Tag:
    """Set the document's ``<title>``.

    Args:
        document (bundlehtml.document.HTMLDocument):
            The document to decorate.

        title (str):
            The text of the title.

    Returns:
        bs4.element.Tag:
        The ``<title>`` element.
    """
    node = document.head.find('title')

    if node is None:
        node = document.new_element('title')
        document.insert_with_separator(document.head, node)

    node.string = title

    return node


def apply_favicon(
    document: HTMLDocument,
    favicon: str,
) -> str:
    """Set the favicon link in the document's ``<head>``.

    The link points to the base name of the favicon, which is expected to be
    emitted alongside the document.

    Args:
        document (bundlehtml.document.HTMLDocument):
            The document to decorate.

        favicon (str):
            The path to the favicon.

    Returns:
        str:
        The file name the link points to.
    """
    file_name = os.path.basename(favicon)

    document.replace_or_append(
        document.head,
        'link',
        lambda node: node.get('rel') == FAVICON_REL,
        lambda: document.new_element('link', {
            'rel': FAVICON_REL,
            'href': file_name,
        }))

    return file_name
