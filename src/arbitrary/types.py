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

from random import Random
from typing import Generic, TypeVar

import attr

A = TypeVar('A')
B = TypeVar('B')


class RandomWithSeed(Random):
    """A subclass of Random designed to expose the seed it was initially
    provided with.

    We consistently use this instead of Random objects because it makes
    examples much easier to recreate.
    """

    def __init__(self, seed):
        super(RandomWithSeed, self).__init__(seed)
        self.seed = seed

    def __copy__(self):
        result = RandomWithSeed(self.seed)
        result.setstate(self.getstate())
        return result

    def __deepcopy__(self, table):
        return self.__copy__()

    def __repr__(self):
        return u'RandomWithSeed(%s)' % (self.seed,)


class Result(Generic[A, B]):
    """The two-armed union of a successful value and a failure value.

    Values are always one of the two arms, ``Ok`` or ``Err``, which wrap
    a single payload. ``Result[A, B]`` can be used as an annotation and
    resolved with ``from_type``.
    """

    __slots__ = ()

    def is_ok(self):
        return isinstance(self, Ok)

    def is_err(self):
        return isinstance(self, Err)


@attr.s(slots=True, frozen=True, repr=False)
class Ok(Result):
    value = attr.ib()

    def __repr__(self):
        return 'Ok(%r)' % (self.value,)


@attr.s(slots=True, frozen=True, repr=False)
class Err(Result):
    value = attr.ib()

    def __repr__(self):
        return 'Err(%r)' % (self.value,)
