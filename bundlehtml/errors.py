"""Exception classes for BundleHTML."""

from django.core.exceptions import ImproperlyConfigured


class BundleHTMLError(Exception):
    """Base class for errors raised while building an HTML document."""


class ConfigurationError(BundleHTMLError, ImproperlyConfigured):
    """An error in the options provided to the plugin.

    These are raised before any document work begins, either when the build
    starts or once the output options are known.
    """


class TemplateError(BundleHTMLError):
    """An error in the structure of the HTML template."""
