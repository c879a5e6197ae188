"""Deprecation warnings for BundleHTML.

The version-specific objects in this module are not considered stable between
releases, and may be removed at any point.
"""

from __future__ import annotations

from housekeeping import BaseRemovedInWarning


class BaseRemovedInBundleHTMLVersionWarning(BaseRemovedInWarning):
    """Base class for a BundleHTML deprecation warning.

    All version-specific deprecation warnings inherit from this, allowing
    callers to check for BundleHTML deprecations without being tied to a
    specific version.
    """

    product = 'BundleHTML'


class RemovedInBundleHTML20Warning(BaseRemovedInBundleHTMLVersionWarning):
    """Deprecations for features scheduled for removal in BundleHTML 2.0.

    Note that this class will itself be removed in BundleHTML 2.0. If you need
    to check against BundleHTML deprecation warnings, please see
    :py:class:`BaseRemovedInBundleHTMLVersionWarning`.
    """

    version = '2.0'


#: An alias for the next release of BundleHTML where features would be
#: removed.
RemovedInNextBundleHTMLVersionWarning = RemovedInBundleHTML20Warning
