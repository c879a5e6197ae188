"""Django settings for BundleHTML.

Projects can configure the plugin through the ``HTML_BUNDLE`` setting, which
holds the keyword arguments for
:py:class:`~bundlehtml.plugin.HTMLBundlePlugin`:

.. code-block:: python

   HTML_BUNDLE = {
       'template': os.path.join(BASE_DIR, 'frontend', 'index.html'),
       'title': 'My App',
       'online_path': STATIC_URL,
       'modules': True,
   }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from django.conf import settings

from bundlehtml.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping


#: The name of the Django setting holding the plugin options.
SETTING_NAME = 'HTML_BUNDLE'


def get_html_bundle_options(
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Return the plugin options from the Django settings.

    Args:
        overrides (dict, optional):
            Options taking precedence over the settings.

    Returns:
        dict:
        The plugin options.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The setting is missing or isn't a dictionary.
    """
    options = getattr(settings, SETTING_NAME, None)

    if options is None:
        raise ConfigurationError(
            'settings.%s must be set to use BundleHTML.' % SETTING_NAME)

    if not isinstance(options, dict):
        raise ConfigurationError(
            'settings.%s must be a dictionary, not %s.'
            % (SETTING_NAME, type(options).__name__))

    result = dict(options)

    if overrides:
        result.update(overrides)

    return result
