"""Configures pytest and the Django environment for BundleHTML.

.. important::

   Do not define plugins in this file! Plugins must be in a different
   package. pytest overrides importers for plugins and all modules
   descending from that module level.
"""

import django
from django.conf import settings

import bundlehtml


def pytest_configure(config):
    """Configure Django settings for the test run.

    Args:
        config (object):
            The pytest configuration object.
    """
    if not settings.configured:
        settings.configure(
            DEBUG=False,
            INSTALLED_APPS=[
                'bundlehtml',
            ],
            SECRET_KEY='bundlehtml-tests',
            USE_I18N=False)

    django.setup()


def pytest_report_header(config):
    """Return information for the report header.

    This will log the versions of BundleHTML and Django.

    Args:
        config (object):
            The pytest configuration object.

    Returns:
        list of str:
        The report header entries to log.
    """
    return [
        'bundlehtml version: %s' % bundlehtml.get_version_string(),
        'django version: %s' % django.get_version(),
    ]
