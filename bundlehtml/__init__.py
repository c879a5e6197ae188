"""BundleHTML, a build plugin generating HTML documents for bundles."""

from __future__ import annotations


#: The version of BundleHTML.
#:
#: This is in the format of:
#:
#:     (Major, Minor, Micro, alpha/beta/rc/final, Release Number, Released)
VERSION = (1, 2, 0, 'final', 0, True)


#: Short tags used for pre-release versions in package version numbers.
_PACKAGE_TAGS = {
    'alpha': 'a',
    'beta': 'b',
    'rc': 'rc',
}


def _get_base_version() -> str:
    """Return the numeric part of the version.

    The micro version is left out when it's 0.

    Returns:
        str:
        The version, such as ``1.2`` or ``1.2.1``.
    """
    major, minor, micro = VERSION[:3]

    if micro:
        return '%d.%d.%d' % (major, minor, micro)
    else:
        return '%d.%d' % (major, minor)


def get_version_string() -> str:
    """Return a human-readable version of BundleHTML.

    This is shown in test report headers.

    Returns:
        str:
        The version, such as ``1.2 RC1 (dev)``.
    """
    tag, release_num = VERSION[3:5]
    version = _get_base_version()

    if tag == 'rc':
        version += ' RC%s' % release_num
    elif tag != 'final':
        version += ' %s %s' % (tag, release_num)

    if not is_release():
        version += ' (dev)'

    return version


def get_package_version() -> str:
    """Return the version of BundleHTML used for packaging.

    Returns:
        str:
        The version, such as ``1.2rc1``.
    """
    tag, release_num = VERSION[3:5]
    version = _get_base_version()

    if tag != 'final':
        version += '%s%s' % (_PACKAGE_TAGS.get(tag, tag), release_num)

    return version


def is_release() -> bool:
    """Return whether this is a released version of BundleHTML.

    Returns:
        bool:
        ``True`` if this version has been released.
    """
    return VERSION[5]


__version_info__ = VERSION[:-1]
__version__ = get_package_version()
