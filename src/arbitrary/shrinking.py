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

"""Base cases for shrink sequences.

Every shrink rule is built out of these two, chained together with
itertools.chain and transformed with map or generator expressions.

"""


def empty_shrinker():
    """Creates a shrinker with zero elements."""
    return iter(())


def single_shrinker(value):
    """Creates a shrinker with a single element."""
    yield value
