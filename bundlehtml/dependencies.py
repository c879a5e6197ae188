"""Version information for BundleHTML dependencies.

This contains constants that packaging and consumers of BundleHTML can use to
look up information on the major dependencies of BundleHTML.
"""

# NOTE: This file may not import other (non-Python) modules! It's used for
#       packaging and may be needed before any dependencies have been
#       installed.

from typing import Dict, List


###########################################################################
# Python and Django compatibility
###########################################################################

#: The minimum supported version of Python 3.x.
PYTHON_3_MIN_VERSION = (3, 8)

#: A string representation of the minimum supported version of Python 3.x.
PYTHON_3_MIN_VERSION_STR = '%s.%s' % PYTHON_3_MIN_VERSION

#: The version range required for Django.
django_version = '>=4.2'


###########################################################################
# Python dependencies
###########################################################################

#: All dependencies required to install BundleHTML.
package_dependencies: Dict[str, str] = {
    'beautifulsoup4': '>=4.11',
    'Django': django_version,
    'housekeeping': '~=1.1',
    'typing_extensions': '>=4.12.2',

    # Provides the "htmlmin" module.
    'htmlmin2': '>=0.1.13',
}

#: Dependencies required to run the BundleHTML test suite.
test_dependencies: Dict[str, str] = {
    'kgb': '>=7.1',
    'pytest': '>=7.0',
    'pytest-django': '>=4.5',
}


###########################################################################
# Packaging utilities
###########################################################################

def build_dependency_list(
    deps: Dict[str, str],
    version_prefix: str = '',
) -> List[str]:
    """Build a list of dependency specifiers from a dependency map.

    This can be used along with :py:data:`package_dependencies` or
    :py:data:`test_dependencies` to build a list of dependency specifiers
    for use in :file:`setup.py`.

    Args:
        deps (dict):
            A dictionary of dependencies.

        version_prefix (str, optional):
            A prefix to place before each version range.

    Returns:
        list of str:
        A list of dependency specifiers.
    """
    new_deps = [
        '%s%s%s' % (dep_name, version_prefix, dep_details)
        for dep_name, dep_details in deps.items()
    ]

    return sorted(new_deps, key=lambda s: s.lower())
