"""Validation and normalization of plugin options.

Options are validated in two phases. :py:func:`validate_options` runs when a
build starts and checks everything that can be checked from the options
alone. :py:func:`validate_output_options` runs once the bundler has resolved
its output options, and checks anything depending on the output format or
location.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import (TYPE_CHECKING, Any, FrozenSet, List, Optional, Tuple,
                    Union)

from typing_extensions import Literal, NotRequired, TypeAlias, TypedDict

from bundlehtml.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


#: Output formats that can be loaded as native ES modules.
MODULE_FORMATS: FrozenSet[str] = frozenset({'es', 'esm', 'module'})


class InjectTarget(Enum):
    """A location in the document where tags can be injected."""

    #: Inject into the ``<head>`` element.
    HEAD = 'head'

    #: Inject into the ``<body>`` element.
    BODY = 'body'


class ExternalPosition(Enum):
    """Where an external is injected relative to the generated files."""

    #: Insert before generated entries.
    BEFORE = 'before'

    #: Insert after generated entries.
    AFTER = 'after'


class CrossOrigin(Enum):
    """Whether CORS must be used when fetching a resource.

    If no value is set for a resource, it's fetched without a CORS request.
    """

    #: A cross-origin request is performed, but no credential is sent.
    ANONYMOUS = 'anonymous'

    #: A cross-origin request is performed along with a credential.
    USE_CREDENTIALS = 'use-credentials'


class AssetType(Enum):
    """The type of a resource referenced from the document."""

    #: A stylesheet, referenced by ``<link rel="stylesheet">``.
    STYLESHEET = 'css'

    #: A script, referenced by ``<script>``.
    SCRIPT = 'js'

    @classmethod
    def from_extension(
        cls,
        ext: str,
    ) -> AssetType:
        """Return the asset type used to inject a file with an extension.

        Anything that isn't a stylesheet is injected as a script.

        Args:
            ext (str):
                The file extension, without the leading ``.``.

        Returns:
            AssetType:
            The asset type for the extension.
        """
        if ext == 'css':
            return cls.STYLESHEET
        else:
            return cls.SCRIPT

    @classmethod
    def parse(
        cls,
        value: Union[str, AssetType],
    ) -> AssetType:
        """Return an asset type from a configured value.

        Args:
            value (str or AssetType):
                The configured value. This may be ``css`` or ``style`` for
                stylesheets, or ``js`` or ``script`` for scripts.

        Returns:
            AssetType:
            The parsed asset type.

        Raises:
            bundlehtml.errors.ConfigurationError:
                The value isn't a known asset type.
        """
        if isinstance(value, AssetType):
            return value
        elif value in ('css', 'style'):
            return cls.STYLESHEET
        elif value in ('js', 'script'):
            return cls.SCRIPT
        else:
            raise ConfigurationError(
                'Invalid type for the external: %r' % (value,))

    @property
    def preload_as(self) -> str:
        """The value for the ``as`` attribute of a preload link."""
        if self is AssetType.STYLESHEET:
            return 'style'
        else:
            return 'script'


#: The normalized value of the ``inject`` option.
#:
#: ``None`` means tags go to their natural position, and ``False`` disables
#: injection of generated files.
InjectOption: TypeAlias = Optional[Union[Literal[False], InjectTarget]]


class ExternalConfig(TypedDict):
    """The configuration for an external resource."""

    #: Where the external goes relative to generated files.
    position: Union[str, ExternalPosition]

    #: The URL or path of the resource, injected as-is.
    file_path: str

    #: The resource type. This is inferred from the extension if unset.
    type: NotRequired[Union[str, AssetType]]

    #: The element the resource is injected into.
    insert_point: NotRequired[Union[str, InjectTarget]]

    #: The CORS policy for fetching the resource.
    crossorigin: NotRequired[Union[str, CrossOrigin]]


class HTMLBundleOptions(TypedDict, total=False):
    """The options accepted by :py:class:`~bundlehtml.plugin.HTMLBundlePlugin`.
    """

    #: A path to an HTML template file, or a literal HTML string.
    template: str

    #: The output file name for the HTML document.
    file_name: str

    #: ``False``, ``'head'``, or ``'body'``.
    inject: Union[bool, str, InjectTarget]

    #: The text for the document's ``<title>``.
    title: str

    #: A path to a favicon file.
    favicon: str

    #: A mapping of ``<meta>`` names to contents.
    meta: Mapping[str, str]

    #: External resources to inject.
    externals: Sequence[Union[ExternalConfig, External]]

    #: Logical names of dynamic entries to preload.
    preload: Iterable[str]

    #: Whether scripts are loaded as ES modules.
    modules: bool

    #: Whether scripts carry the ``nomodule`` attribute.
    nomodule: bool

    #: Options for the HTML minifier, or ``True`` for the defaults.
    minify_options: Union[bool, Mapping[str, Any]]

    #: A URL path prefix for generated files.
    online_path: str


_EXTERNAL_KEYS = frozenset(ExternalConfig.__annotations__.keys())


@dataclass(frozen=True)
class External:
    """A resource not produced by the build, injected into the document."""

    #: The URL or path of the resource.
    file_path: str

    #: Where the external goes relative to generated files.
    position: ExternalPosition

    #: The resource type, if explicitly configured.
    type: Optional[AssetType] = None

    #: The element the resource is injected into, if explicitly configured.
    insert_point: Optional[InjectTarget] = None

    #: The CORS policy for fetching the resource.
    crossorigin: Optional[CrossOrigin] = None

    @classmethod
    def from_config(
        cls,
        config: Union[ExternalConfig, External],
    ) -> External:
        """Return a validated external from its configuration.

        Args:
            config (dict or External):
                The configuration for the external.

        Returns:
            External:
            The validated external.

        Raises:
            bundlehtml.errors.ConfigurationError:
                The configuration was invalid.
        """
        if isinstance(config, External):
            return config

        if not isinstance(config, dict):
            raise ConfigurationError(
                'Invalid external: %r' % (config,))

        unknown_keys = set(config.keys()) - _EXTERNAL_KEYS

        if unknown_keys:
            raise ConfigurationError(
                'Unknown keys for the external: %s'
                % ', '.join(sorted(unknown_keys)))

        file_path = config.get('file_path')

        if not file_path or not isinstance(file_path, str):
            raise ConfigurationError(
                'Invalid file_path for the external: %r' % (file_path,))

        position = config.get('position')

        try:
            position = ExternalPosition(position)
        except ValueError:
            raise ConfigurationError(
                'Invalid position for the external: %r' % (position,))

        crossorigin = config.get('crossorigin')

        if crossorigin:
            try:
                crossorigin = CrossOrigin(crossorigin)
            except ValueError:
                raise ConfigurationError(
                    'Invalid crossorigin argument for the external: %r'
                    % (crossorigin,))
        else:
            crossorigin = None

        insert_point = config.get('insert_point')

        if insert_point:
            try:
                insert_point = InjectTarget(insert_point)
            except ValueError:
                raise ConfigurationError(
                    'Invalid insert_point for the external: %r'
                    % (insert_point,))
        else:
            insert_point = None

        asset_type = config.get('type')

        if asset_type:
            asset_type = AssetType.parse(asset_type)
        else:
            asset_type = None

        return cls(file_path=file_path,
                   position=position,
                   type=asset_type,
                   insert_point=insert_point,
                   crossorigin=crossorigin)

    @property
    def asset_type(self) -> AssetType:
        """The configured type, or the type inferred from the extension."""
        if self.type is not None:
            return self.type

        return AssetType.from_extension(get_file_extension(self.file_path))


@dataclass
class OutputOptions:
    """Output options resolved by the bundler."""

    #: The output directory, if one was configured.
    dir: Optional[str] = None

    #: The single output file, if one was configured.
    file: Optional[str] = None

    #: The output format (such as ``es``, ``cjs``, or ``iife``).
    format: str = 'es'

    #: Raw markup produced by a cooperating favicon generator.
    #:
    #: These are spliced into the document's ``<head>`` as-is.
    favicon_markers: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ValidatedOptions:
    """Options normalized by :py:func:`validate_options`."""

    #: Whether the template is a path to a file.
    template_is_file: bool

    #: The normalized ``inject`` option.
    inject: InjectOption

    #: The validated externals, in configuration order.
    externals: Tuple[External, ...]

    #: The logical names of dynamic entries to preload.
    preload: FrozenSet[str]

    #: The URL path prefix for generated files.
    online_path: str

    #: Whether scripts are loaded as ES modules.
    modules: bool

    #: Whether scripts carry the ``nomodule`` attribute.
    nomodule: bool


def get_file_extension(
    path: str,
) -> str:
    """Return the extension of a path, without the leading ``.``.

    Args:
        path (str):
            The file path or URL.

    Returns:
        str:
        The extension, or an empty string.
    """
    return os.path.splitext(path)[1][1:]


def normalize_preload(
    preload: Any,
) -> FrozenSet[str]:
    """Return the set of logical entry names to preload.

    Args:
        preload (iterable of str):
            The configured names. This may be ``None`` or ``False``.

    Returns:
        frozenset of str:
        The normalized set of names.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The value wasn't a collection of names.
    """
    if preload is None or preload is False:
        return frozenset()

    if isinstance(preload, (str, bytes)) or not isinstance(preload, Iterable):
        raise ConfigurationError(
            'Invalid `preload` argument: %r. This must be a list of entry '
            'names.' % (preload,))

    names = frozenset(preload)

    for name in names:
        if not isinstance(name, str):
            raise ConfigurationError(
                'Invalid entry name in the `preload` argument: %r'
                % (name,))

    return names


def normalize_prefix(
    prefix: Any = '',
) -> str:
    """Return a URL path prefix ending with exactly one ``/``.

    Args:
        prefix (str):
            The configured prefix. This may be ``None`` or empty.

    Returns:
        str:
        The normalized prefix, or an empty string.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The value wasn't a string.
    """
    if prefix is None:
        return ''

    if not isinstance(prefix, str):
        raise ConfigurationError(
            'Invalid `online_path` argument: %r' % (prefix,))

    if not prefix:
        return ''

    return '%s/' % prefix.rstrip('/')


def parse_inject(
    inject: Any,
) -> InjectOption:
    """Return the normalized value of the ``inject`` option.

    Args:
        inject (object):
            The configured value.

    Returns:
        InjectTarget:
        The target, ``None`` if tags go to their natural positions, or
        ``False`` if generated files aren't injected.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The value is not a valid target.
    """
    if inject is None or inject is True:
        return None
    elif inject is False:
        return False
    elif isinstance(inject, InjectTarget):
        return inject
    elif isinstance(inject, str):
        try:
            return InjectTarget(inject)
        except ValueError:
            pass

    raise ConfigurationError('Invalid `inject` argument: %r' % (inject,))


def check_boolean(
    name: str,
    value: Any,
) -> bool:
    """Check that an option is a boolean or unset.

    Args:
        name (str):
            The name of the option.

        value (object):
            The configured value.

    Returns:
        bool:
        The value, with ``None`` converted to ``False``.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The value isn't a boolean.
    """
    if value is None:
        return False

    if not isinstance(value, bool):
        raise ConfigurationError(
            'Invalid `%s` argument: %r' % (name, value))

    return value


def check_title(
    title: Any,
) -> Optional[str]:
    """Check that the ``title`` option is a string or unset.

    Args:
        title (object):
            The configured value.

    Returns:
        str:
        The title, or ``None`` if unset.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The value isn't a string.
    """
    if title is not None and not isinstance(title, str):
        raise ConfigurationError('Invalid `title` argument: %r' % (title,))

    return title


def check_meta(
    meta: Any,
) -> Optional[Mapping[str, str]]:
    """Check that the ``meta`` option maps names to contents.

    Args:
        meta (object):
            The configured value.

    Returns:
        dict:
        The mapping, or ``None`` if unset.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The value isn't a mapping of strings to strings.
    """
    if meta is None:
        return None

    if not isinstance(meta, Mapping):
        raise ConfigurationError(
            'Invalid `meta` argument: %r. This must be a mapping of names '
            'to contents.' % (meta,))

    for name, content in meta.items():
        if not isinstance(name, str) or not isinstance(content, str):
            raise ConfigurationError(
                'Invalid `meta` entry: %r: %r' % (name, content))

    return meta


def check_minify_options(
    minify_options: Any,
) -> Any:
    """Check that the ``minify_options`` option is usable by the minifier.

    Args:
        minify_options (object):
            The configured value.

    Returns:
        bool or dict:
        The value, or ``None`` if unset.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The value isn't a boolean or a mapping of option names.
    """
    if minify_options is None or isinstance(minify_options, bool):
        return minify_options

    if not isinstance(minify_options, Mapping):
        raise ConfigurationError(
            'Invalid `minify_options` argument: %r' % (minify_options,))

    for key in minify_options:
        if not isinstance(key, str):
            raise ConfigurationError(
                'Invalid option name in the `minify_options` argument: %r'
                % (key,))

    return minify_options


def format_supports_modules(
    output_format: Optional[str],
) -> bool:
    """Return whether an output format can be loaded as native modules.

    Args:
        output_format (str):
            The bundler's output format.

    Returns:
        bool:
        ``True`` if scripts in this format are ES modules.
    """
    return output_format in MODULE_FORMATS


def is_regular_file(
    path: Optional[str],
) -> bool:
    """Return whether a value is a path to an existing regular file.

    Args:
        path (str):
            The possible path. This may be literal HTML.

    Returns:
        bool:
        ``True`` if the value is the path to a regular file.
    """
    return bool(path) and os.path.isfile(path)


def validate_options(
    *,
    template: Optional[str],
    file_name: Optional[str] = None,
    favicon: Optional[str] = None,
    title: Any = None,
    meta: Any = None,
    inject: Any = None,
    externals: Optional[Sequence[Union[ExternalConfig, External]]] = None,
    preload: Optional[Iterable[str]] = None,
    online_path: Optional[str] = None,
    modules: Any = None,
    nomodule: Any = None,
    minify_options: Any = None,
    legacy_file: Optional[str] = None,
) -> ValidatedOptions:
    """Validate and normalize options when a build starts.

    Args:
        template (str):
            A path to the template file, or a literal HTML string.

        file_name (str, optional):
            The explicit output file name.

        favicon (str, optional):
            A path to the favicon.

        title (str, optional):
            The text for the document's ``<title>``.

        meta (dict, optional):
            A mapping of ``<meta>`` names to contents.

        inject (object, optional):
            The ``inject`` option.

        externals (list, optional):
            The external resource configurations.

        preload (iterable of str, optional):
            The logical names of dynamic entries to preload.

        online_path (str, optional):
            The URL path prefix for generated files.

        modules (bool, optional):
            Whether scripts are loaded as ES modules.

        nomodule (bool, optional):
            Whether scripts carry the ``nomodule`` attribute.

        minify_options (bool or dict, optional):
            Options for the HTML minifier.

        legacy_file (str, optional):
            The value of the removed ``file`` option.

    Returns:
        ValidatedOptions:
        The normalized options.

    Raises:
        bundlehtml.errors.ConfigurationError:
            One or more options were invalid.
    """
    if legacy_file:
        raise ConfigurationError(
            'The `file` option is no longer supported, use `file_name` '
            'instead.')

    if not template or not isinstance(template, str):
        raise ConfigurationError(
            'The `template` option must be a path to an HTML file or an '
            'HTML string.')

    template_is_file = is_regular_file(template)

    if not template_is_file and not file_name:
        raise ConfigurationError(
            'When `template` is an HTML string the `file_name` option must '
            'be defined.')

    if favicon and not is_regular_file(favicon):
        raise ConfigurationError(
            "The provided favicon file doesn't exist: %s" % favicon)

    check_title(title)
    check_meta(meta)
    check_minify_options(minify_options)

    return ValidatedOptions(
        template_is_file=template_is_file,
        inject=parse_inject(inject),
        externals=tuple(
            External.from_config(external)
            for external in (externals or [])
        ),
        preload=normalize_preload(preload),
        online_path=normalize_prefix(online_path),
        modules=check_boolean('modules', modules),
        nomodule=check_boolean('nomodule', nomodule))


def resolve_output_file_name(
    template: str,
    output_options: OutputOptions,
    cwd: Optional[str] = None,
) -> str:
    """Return the output path for a document built from a template file.

    The document is placed in the bundler's output directory, using the
    base name of the template.

    Args:
        template (str):
            The path to the template file.

        output_options (OutputOptions):
            The bundler's output options.

        cwd (str, optional):
            The directory relative paths are resolved against. This
            defaults to the current working directory.

    Returns:
        str:
        The absolute output path.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The output path would overwrite the template.
    """
    dist_dir = cwd or os.getcwd()

    if output_options.dir:
        dist_dir = os.path.join(dist_dir, output_options.dir)
    elif output_options.file:
        dist_dir = os.path.join(dist_dir,
                                os.path.dirname(output_options.file))

    file_name = os.path.abspath(
        os.path.join(dist_dir, os.path.basename(template)))

    if file_name == os.path.abspath(os.path.join(cwd or os.getcwd(),
                                                 template)):
        raise ConfigurationError(
            "Couldn't write the generated HTML to the source template. "
            "Define one of the options: `file_name`, `output.file`, or "
            "`output.dir`.")

    return file_name


def validate_output_options(
    options: ValidatedOptions,
    output_options: OutputOptions,
) -> None:
    """Validate options against the bundler's output options.

    Args:
        options (ValidatedOptions):
            The options normalized when the build started.

        output_options (OutputOptions):
            The bundler's output options.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The options conflict with each other or with the output format.
    """
    if options.modules and options.nomodule:
        raise ConfigurationError(
            'Options `modules` and `nomodule` cannot be set at the same '
            'time.')

    output_format = output_options.format
    supports_modules = format_supports_modules(output_format)

    _check_modules_option('modules', output_format,
                          options.modules and not supports_modules)
    _check_modules_option('nomodule', output_format,
                          options.nomodule and supports_modules)


def _check_modules_option(
    name: str,
    output_format: str,
    conflicts: bool,
) -> None:
    """Raise an error if a module option conflicts with the output format.

    Args:
        name (str):
            The name of the option.

        output_format (str):
            The bundler's output format.

        conflicts (bool):
            Whether the option conflicts with the format.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The option conflicts with the format.
    """
    if conflicts:
        raise ConfigurationError(
            'The `%s` option is set to true but the output format is %s. '
            'Consider using another format or switching off the option.'
            % (name, output_format))
