"""Injection of script, stylesheet, and preload tags into a document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional

from bundlehtml.bundles import classify_outputs, split_file_name
from bundlehtml.options import AssetType, ExternalPosition, InjectTarget

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from bs4.element import Tag

    from bundlehtml.bundles import OutputFile
    from bundlehtml.document import HTMLDocument
    from bundlehtml.options import CrossOrigin, External, InjectOption


logger = logging.getLogger(__name__)


def get_preload_type(
    ext: str,
) -> Optional[AssetType]:
    """Return the asset type used to preload a file with an extension.

    Args:
        ext (str):
            The file extension, without the leading ``.``.

    Returns:
        AssetType:
        The asset type, or ``None`` if files of this type can't be
        preloaded.
    """
    try:
        return AssetType(ext)
    except ValueError:
        return None


class TagInjector:
    """Places tags referencing build outputs and externals in a document.

    Stylesheets are placed in ``<head>`` and scripts in ``<body>``, unless a
    target explicitly asks for the other element.
    """

    def __init__(
        self,
        document: HTMLDocument,
        *,
        modules: bool = False,
        nomodule: bool = False,
    ) -> None:
        """Initialize the injector.

        Args:
            document (bundlehtml.document.HTMLDocument):
                The document to inject into.

            modules (bool, optional):
                Whether scripts are loaded as ES modules.

            nomodule (bool, optional):
                Whether scripts carry the ``nomodule`` attribute.
        """
        self.document = document

        if modules:
            self._module_attrs: Dict[str, str] = {'type': 'module'}
        elif nomodule:
            self._module_attrs = {'nomodule': ''}
        else:
            self._module_attrs = {}

    def get_parent(
        self,
        asset_type: AssetType,
        target: Optional[InjectTarget] = None,
    ) -> Tag:
        """Return the element a tag for an asset is placed in.

        Args:
            asset_type (bundlehtml.options.AssetType):
                The type of asset.

            target (bundlehtml.options.InjectTarget, optional):
                The requested target, if any.

        Returns:
            bs4.element.Tag:
            The ``<head>`` or ``<body>`` element.
        """
        document = self.document

        if asset_type is AssetType.STYLESHEET:
            if target is InjectTarget.BODY:
                return document.body
            else:
                return document.head
        else:
            if target is InjectTarget.HEAD:
                return document.head
            else:
                return document.body

    def inject(
        self,
        url: str,
        asset_type: AssetType,
        target: Optional[InjectTarget] = None,
        crossorigin: Optional[CrossOrigin] = None,
    ) -> Tag:
        """Inject a stylesheet link or a script into the document.

        Args:
            url (str):
                The URL of the resource.

            asset_type (bundlehtml.options.AssetType):
                The type of resource.

            target (bundlehtml.options.InjectTarget, optional):
                The requested target, if any.

            crossorigin (bundlehtml.options.CrossOrigin, optional):
                The CORS policy for fetching the resource.

        Returns:
            bs4.element.Tag:
            The new element.
        """
        cors = crossorigin.value if crossorigin is not None else None

        if asset_type is AssetType.STYLESHEET:
            node = self.document.new_element('link', {
                'rel': 'stylesheet',
                'crossorigin': cors,
                'href': url,
            })
        else:
            node = self.document.new_element('script', {
                **self._module_attrs,
                'crossorigin': cors,
                'src': url,
            })

        parent = self.get_parent(asset_type, target)
        self.document.insert_with_separator(parent, node)

        logger.debug('Injected %s into <%s>', node, parent.name)

        return node

    def inject_preload(
        self,
        url: str,
        asset_type: AssetType,
    ) -> Tag:
        """Inject a preload link into ``<head>``.

        Args:
            url (str):
                The URL of the resource.

            asset_type (bundlehtml.options.AssetType):
                The type of resource.

        Returns:
            bs4.element.Tag:
            The new element.
        """
        node = self.document.new_element('link', {
            'rel': 'preload',
            'href': url,
            'as': asset_type.preload_as,
        })
        self.document.insert_with_separator(self.document.head, node)

        logger.debug('Injected %s into <head>', node)

        return node

    def inject_externals(
        self,
        externals: Iterable[External],
        position: ExternalPosition,
    ) -> None:
        """Inject the externals configured for a position.

        Args:
            externals (iterable of bundlehtml.options.External):
                All configured externals, in configuration order.

            position (bundlehtml.options.ExternalPosition):
                The position being processed.
        """
        for external in externals:
            if external.position is position:
                self.inject(external.file_path,
                            external.asset_type,
                            target=external.insert_point,
                            crossorigin=external.crossorigin)

    def inject_outputs(
        self,
        outputs: Sequence[OutputFile],
        *,
        target: Optional[InjectTarget] = None,
        preload: Iterable[str] = frozenset(),
        online_path: str = '',
    ) -> None:
        """Inject tags for the entries in a bundle.

        Files sharing a stem with a static entry are injected. Files sharing
        a stem with a dynamic entry are preloaded if the entry's name is in
        ``preload``. Everything else is left out.

        Args:
            outputs (list of bundlehtml.bundles.OutputFile):
                The files produced by the bundler, in bundler order.

            target (bundlehtml.options.InjectTarget, optional):
                The requested target for entries, if any.

            preload (set of str, optional):
                The logical names of dynamic entries to preload.

            online_path (str, optional):
                The normalized URL prefix for the files.
        """
        index = classify_outputs(outputs)
        entries = index.entries
        dynamic_entries = index.dynamic_entries

        logger.debug('Found %d entries and %d dynamic entries',
                     len(entries), len(dynamic_entries))

        for output in outputs:
            stem, ext = split_file_name(output.file_name)
            url = online_path + output.file_name

            if stem in entries:
                self.inject(url, AssetType.from_extension(ext), target)
            elif (stem in dynamic_entries and
                  dynamic_entries[stem] in preload):
                preload_type = get_preload_type(ext)

                if preload_type is not None:
                    self.inject_preload(url, preload_type)

    def run(
        self,
        outputs: Sequence[OutputFile],
        *,
        externals: Sequence[External] = (),
        inject: InjectOption = None,
        preload: Iterable[str] = frozenset(),
        online_path: str = '',
    ) -> None:
        """Inject all externals and bundle entries into the document.

        Externals positioned before the generated files come first, then the
        bundle entries and preload links, then the remaining externals.

        Args:
            outputs (list of bundlehtml.bundles.OutputFile):
                The files produced by the bundler, in bundler order.

            externals (list of bundlehtml.options.External, optional):
                The configured externals.

            inject (object, optional):
                The normalized ``inject`` option. If ``False``, only
                externals are injected.

            preload (set of str, optional):
                The logical names of dynamic entries to preload.

            online_path (str, optional):
                The normalized URL prefix for generated files.
        """
        self.inject_externals(externals, ExternalPosition.BEFORE)

        if inject is not False:
            self.inject_outputs(outputs,
                                target=inject,
                                preload=preload,
                                online_path=online_path)

        self.inject_externals(externals, ExternalPosition.AFTER)
