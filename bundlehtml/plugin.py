"""The build plugin producing an HTML document for a bundle.

The plugin is driven by a build orchestrator through three lifecycle hooks:

1. :py:meth:`HTMLBundlePlugin.build_start`, when the build starts.
2. :py:meth:`HTMLBundlePlugin.output_options`, once the bundler knows its
   output options.
3. :py:meth:`HTMLBundlePlugin.generate_bundle`, once the bundle's files have
   been produced.

A typical build looks like:

.. code-block:: python

   plugin = HTMLBundlePlugin(template='src/index.html',
                             title='My App',
                             preload=['settings'],
                             modules=True)
   context = FileSystemBuildContext(output_dir='dist')

   plugin.run(context, OutputOptions(dir='dist', format='es'), outputs)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, List, Optional, Tuple, Union

from bundlehtml.decorations import (apply_favicon, apply_favicon_markers,
                                    apply_meta, apply_title)
from bundlehtml.deprecation import RemovedInBundleHTML20Warning
from bundlehtml.document import HTMLDocument
from bundlehtml.errors import BundleHTMLError
from bundlehtml.injector import TagInjector
from bundlehtml.minify import minify_html
from bundlehtml.options import (resolve_output_file_name, validate_options,
                                validate_output_options)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from bundlehtml.bundles import OutputFile
    from bundlehtml.context import BuildContext
    from bundlehtml.options import (External, ExternalConfig, OutputOptions,
                                    ValidatedOptions)


logger = logging.getLogger(__name__)


#: The cache key storing whether the template is a file.
TEMPLATE_IS_FILE_CACHE_KEY = 'templateIsFile'


class HTMLBundlePlugin:
    """A build plugin producing an HTML document for a bundle.

    The document is built from a template. Scripts and stylesheets for the
    bundle's entries are injected, along with preload links for chosen
    dynamic entries, external resources, a title, ``<meta>`` elements, and a
    favicon.

    Attributes:
        output_file_name (str):
            The path of the generated document. This is resolved from the
            output options if not explicitly set.

        validated_options (bundlehtml.options.ValidatedOptions):
            The options normalized when the build started.
    """

    #: The name of the plugin.
    name = 'html-bundle'

    def __init__(
        self,
        *,
        template: Optional[str] = None,
        file_name: Optional[str] = None,
        inject: Any = None,
        title: Optional[str] = None,
        favicon: Optional[str] = None,
        meta: Optional[Mapping[str, str]] = None,
        externals: Optional[Sequence[Union[ExternalConfig, External]]] = None,
        preload: Optional[Iterable[str]] = None,
        modules: Any = None,
        nomodule: Any = None,
        minify_options: Optional[Union[bool, Mapping[str, Any]]] = None,
        online_path: Optional[str] = None,
        file: Optional[str] = None,
        **options,
    ) -> None:
        """Initialize the plugin.

        Options are validated when the build starts, rather than here.

        Args:
            template (str):
                A path to an HTML template file, or a literal HTML string.

            file_name (str, optional):
                The path of the generated document. This is required if
                ``template`` is an HTML string.

            inject (bool or str, optional):
                ``False`` to skip injecting the bundle's files, or ``'head'``
                or ``'body'`` to prefer that element for them.

            title (str, optional):
                The text for the document's ``<title>``.

            favicon (str, optional):
                A path to a favicon file to link and emit.

            meta (dict, optional):
                A mapping of ``<meta>`` names to contents.

            externals (list, optional):
                External resources to inject. See
                :py:class:`bundlehtml.options.ExternalConfig`.

            preload (iterable of str, optional):
                The logical names of dynamic entries to preload.

            modules (bool, optional):
                Whether scripts are loaded as ES modules.

            nomodule (bool, optional):
                Whether scripts carry the ``nomodule`` attribute.

            minify_options (bool or dict, optional):
                Options for the HTML minifier, or ``True`` to minify with
                the default options.

            online_path (str, optional):
                A URL path prefix for the bundle's files.

            file (str, optional):
                The removed name of ``file_name``. Setting this fails the
                build.

            **options (dict):
                Unknown options. These are reported as warnings.
        """
        if 'minify' in options:
            RemovedInBundleHTML20Warning.warn(
                'The `minify` option is deprecated and will be removed in '
                'BundleHTML 2.0. Use `minify_options` instead.')

            minify = options.pop('minify')

            if minify_options is None:
                minify_options = minify

        self.template = template
        self.file_name = file_name
        self.inject = inject
        self.title = title
        self.favicon = favicon
        self.meta = meta
        self.externals = externals
        self.preload = preload
        self.modules = modules
        self.nomodule = nomodule
        self.minify_options = minify_options
        self.online_path = online_path
        self.legacy_file = file
        self.unknown_options: List[str] = list(options.keys())

        self.output_file_name: Optional[str] = file_name
        self.validated_options: Optional[ValidatedOptions] = None

    def build_start(
        self,
        context: BuildContext,
    ) -> None:
        """Validate the options when the build starts.

        If the template is a file, it's registered for watching.

        Args:
            context (bundlehtml.context.BuildContext):
                The build context.

        Raises:
            bundlehtml.errors.ConfigurationError:
                One or more options were invalid.
        """
        options = validate_options(template=self.template,
                                   file_name=self.file_name,
                                   favicon=self.favicon,
                                   title=self.title,
                                   meta=self.meta,
                                   inject=self.inject,
                                   externals=self.externals,
                                   preload=self.preload,
                                   online_path=self.online_path,
                                   modules=self.modules,
                                   nomodule=self.nomodule,
                                   minify_options=self.minify_options,
                                   legacy_file=self.legacy_file)

        if options.template_is_file:
            context.add_watch_file(self.template)

        context.cache[TEMPLATE_IS_FILE_CACHE_KEY] = options.template_is_file

        for name in self.unknown_options:
            context.warn('Ignoring unknown option "%s"' % name)

        self.validated_options = options

    def output_options(
        self,
        context: BuildContext,
        output_options: OutputOptions,
    ) -> None:
        """Validate the options against the bundler's output options.

        This resolves the path of the generated document if it wasn't set
        explicitly.

        Args:
            context (bundlehtml.context.BuildContext):
                The build context.

            output_options (bundlehtml.options.OutputOptions):
                The bundler's output options.

        Raises:
            bundlehtml.errors.ConfigurationError:
                The options conflict with the output options.
        """
        options = self._get_validated_options()

        if not self.output_file_name:
            # The template is always a file path here.
            self.output_file_name = resolve_output_file_name(self.template,
                                                             output_options)
            logger.debug('Writing the HTML document to %s',
                         self.output_file_name)

        validate_output_options(options, output_options)

    def generate_bundle(
        self,
        context: BuildContext,
        output_options: OutputOptions,
        outputs: Sequence[OutputFile],
    ) -> str:
        """Build and emit the HTML document for a bundle.

        Nothing is emitted unless the whole document is built successfully.

        Args:
            context (bundlehtml.context.BuildContext):
                The build context.

            output_options (bundlehtml.options.OutputOptions):
                The bundler's output options.

            outputs (list of bundlehtml.bundles.OutputFile):
                The files produced by the bundler, in bundler order.

        Returns:
            str:
            The generated HTML.

        Raises:
            bundlehtml.errors.TemplateError:
                The template doesn't contain an ``<html>`` element.
        """
        options = self._get_validated_options()

        if not self.output_file_name:
            raise BundleHTMLError(
                'output_options() must be called before generate_bundle().')

        if context.cache.get(TEMPLATE_IS_FILE_CACHE_KEY):
            with open(self.template, 'r', encoding='utf-8') as fp:
                source = fp.read()
        else:
            source = self.template

        document = HTMLDocument(source)
        pending_files: List[Tuple[str, Union[str, bytes]]] = []

        if self.meta:
            apply_meta(document, self.meta)

        apply_favicon_markers(document, output_options.favicon_markers)

        if self.title:
            apply_title(document, self.title)

        if self.favicon:
            favicon_name = apply_favicon(document, self.favicon)

            with open(self.favicon, 'rb') as fp:
                pending_files.append((favicon_name, fp.read()))

        injector = TagInjector(document,
                               modules=options.modules,
                               nomodule=options.nomodule)
        injector.run(outputs,
                     externals=options.externals,
                     inject=options.inject,
                     preload=options.preload,
                     online_path=options.online_path)

        html = document.serialize()

        if self.minify_options:
            html = minify_html(html, self.minify_options)

        pending_files.append((os.path.basename(self.output_file_name), html))

        for file_name, file_source in pending_files:
            context.emit_file(file_name, file_source)
            logger.debug('Emitted %s', file_name)

        return html

    def run(
        self,
        context: BuildContext,
        output_options: OutputOptions,
        outputs: Sequence[OutputFile],
    ) -> str:
        """Run every lifecycle hook for a single build.

        Args:
            context (bundlehtml.context.BuildContext):
                The build context.

            output_options (bundlehtml.options.OutputOptions):
                The bundler's output options.

            outputs (list of bundlehtml.bundles.OutputFile):
                The files produced by the bundler, in bundler order.

        Returns:
            str:
            The generated HTML.

        Raises:
            bundlehtml.errors.BundleHTMLError:
                The options or template were invalid.
        """
        self.build_start(context)
        self.output_options(context, output_options)

        return self.generate_bundle(context, output_options, outputs)

    def _get_validated_options(self) -> ValidatedOptions:
        """Return the options normalized when the build started.

        Returns:
            bundlehtml.options.ValidatedOptions:
            The normalized options.

        Raises:
            bundlehtml.errors.BundleHTMLError:
                The build hasn't started.
        """
        if self.validated_options is None:
            raise BundleHTMLError(
                'build_start() must be called before any other hook.')

        return self.validated_options