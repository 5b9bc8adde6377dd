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

"""Arbitrary is the generation and shrinking engine for property based
testing.

It generates pseudo-random values of controllable size, and given a value
produces a finite sequence of simpler values of the same type, so that a
test runner can search for a minimal counterexample.

"""

from arbitrary.gen import Gen, gen
from arbitrary.types import Ok, Err, Result
from arbitrary.lookup import from_type, register_type_arbitrary
from arbitrary.version import __version_info__, __version__
from arbitrary._settings import settings, Verbosity
from arbitrary.shrinking import empty_shrinker, single_shrinker
from arbitrary.arbitraries import Arbitrary, MappedArbitrary, units, \
    booleans, unsigned_integers, signed_integers, floats, characters, \
    optionals, results, tuples, lists, dictionaries, text

__all__ = [
    'settings',
    'Verbosity',
    'Gen',
    'gen',
    'Ok',
    'Err',
    'Result',
    'Arbitrary',
    'MappedArbitrary',
    'empty_shrinker',
    'single_shrinker',
    'from_type',
    'register_type_arbitrary',
    'units',
    'booleans',
    'unsigned_integers',
    'signed_integers',
    'floats',
    'characters',
    'optionals',
    'results',
    'tuples',
    'lists',
    'dictionaries',
    'text',
    '__version__',
    '__version_info__',
]
