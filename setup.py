#!/usr/bin/env python

import sys

from setuptools import find_packages, setup

from bundlehtml import get_package_version
from bundlehtml.dependencies import (PYTHON_3_MIN_VERSION,
                                     PYTHON_3_MIN_VERSION_STR,
                                     build_dependency_list,
                                     package_dependencies,
                                     test_dependencies)


# Make sure this is a version of Python we are compatible with. This should
# prevent people on older versions from unintentionally trying to install
# the source tarball, and failing.
if sys.version_info < PYTHON_3_MIN_VERSION:
    sys.stderr.write('This version of BundleHTML is incompatible with your '
                     'version of Python. Python %s or higher is required.\n'
                     % PYTHON_3_MIN_VERSION_STR)
    sys.exit(1)


PACKAGE_NAME = 'BundleHTML'

with open('README.rst', 'r', encoding='utf-8') as fp:
    long_description = fp.read()


setup(
    name=PACKAGE_NAME,
    version=get_package_version(),
    license='MIT',
    description=('Build plugin that generates an HTML document referencing '
                 'the files in a JavaScript bundle.'),
    long_description=long_description,
    long_description_content_type='text/x-rst',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=%s' % PYTHON_3_MIN_VERSION_STR,
    install_requires=build_dependency_list(package_dependencies),
    extras_require={
        'test': build_dependency_list(test_dependencies),
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Environment :: Web Environment',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Software Development :: Build Tools',
    ],
)
