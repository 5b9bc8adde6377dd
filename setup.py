# coding=utf-8
#
# This file is part of Arbitrary, a generation and shrinking engine for
# property based testing.
#
# Portions of this work are derived from Hypothesis, copyright (C) 2013-2018
# David R. MacIver (david@drmaciver.com) and others. See CONTRIBUTING.rst for
# a full list of people who may hold copyright, and consult the git log if you
# need to determine who owns an individual contribution.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import os

import setuptools


def local_file(name):
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))


SOURCE = local_file('src')
README = local_file('README.rst')


# Assignment to placate pyflakes. The actual version is from the exec that
# follows.
__version__ = None

with open(local_file('src/arbitrary/version.py')) as o:
    exec(o.read())

assert __version__ is not None


extras = {
    'test': ['pytest>=3.0', 'hypothesis>=6.0'],
}

install_requires = ['attrs>=19.2.0']

setuptools.setup(
    name='arbitrary',
    version=__version__,
    author='David R. MacIver',
    author_email='david@drmaciver.com',
    packages=setuptools.find_packages(SOURCE),
    package_dir={'': SOURCE},
    license='MPL v2',
    description='Value generation and shrinking for property based testing',
    zip_safe=False,
    extras_require=extras,
    install_requires=install_requires,
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
        'Operating System :: Unix',
        'Operating System :: POSIX',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Testing',
    ],
    long_description=open(README).read(),
)
