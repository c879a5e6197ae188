"""Minification of generated HTML documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict

import htmlmin

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Union


logger = logging.getLogger(__name__)


#: The default options passed to :py:func:`htmlmin.minify`.
DEFAULT_MINIFY_OPTIONS: Dict[str, Any] = {
    'remove_comments': True,
    'remove_empty_space': True,
    'remove_all_empty_space': False,
    'reduce_empty_attributes': True,
    'reduce_boolean_attributes': False,
    'remove_optional_attribute_quotes': False,
    'convert_charrefs': True,
    'keep_pre': False,
    'pre_tags': ('pre', 'textarea'),
    'pre_attr': 'pre',
}


def get_minify_options(
    options: Union[bool, Mapping[str, Any]],
) -> Dict[str, Any]:
    """Return the options to pass to the minifier.

    Configured options are merged over :py:data:`DEFAULT_MINIFY_OPTIONS`.
    Options the minifier doesn't recognize are logged and dropped.

    Args:
        options (bool or dict):
            The configured options, or ``True`` to use the defaults.

    Returns:
        dict:
        The merged options.
    """
    minify_options = DEFAULT_MINIFY_OPTIONS.copy()

    if options is True:
        return minify_options

    for key, value in options.items():
        if key in minify_options:
            minify_options[key] = value
        else:
            logger.warning('htmlmin option "%s" not recognized', key)

    return minify_options


def minify_html(
    source: str,
    options: Union[bool, Mapping[str, Any]] = True,
) -> str:
    """Return a minified copy of an HTML document.

    Args:
        source (str):
            The HTML to minify.

        options (bool or dict, optional):
            The configured options, or ``True`` to use the defaults.

    Returns:
        str:
        The minified HTML.
    """
    return htmlmin.minify(source, **get_minify_options(options))
