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

from itertools import chain

from arbitrary import empty_shrinker, single_shrinker


def test_empty_shrinker_has_no_values():
    assert list(empty_shrinker()) == []


def test_single_shrinker_has_one_value():
    assert list(single_shrinker(3)) == [3]


def test_single_shrinker_terminates_after_its_value():
    s = single_shrinker('a')
    assert next(s) == 'a'
    assert next(s, None) is None


def test_shrinkers_compose_by_chaining():
    combined = chain(single_shrinker(1), empty_shrinker(), single_shrinker(2))
    assert list(map(str, combined)) == ['1', '2']


def test_single_shrinker_holds_none():
    assert list(single_shrinker(None)) == [None]
