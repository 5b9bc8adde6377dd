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

"""The random source that Arbitrary instances draw from.

A Gen pairs a random number generator with a size. The size bounds the
magnitude of generated numbers and the length of generated collections, so
increasing it tends to produce larger values. It is fixed for the lifetime
of a Gen, so every draw made while generating a single value sees the same
bound.

"""

from random import Random, getrandbits

from arbitrary.errors import InvalidArgument
from arbitrary._settings import settings
from arbitrary.reporting import debug_report, verbose_report
from arbitrary.types import RandomWithSeed
from arbitrary.internal.validation import check_type, check_valid_size, \
    check_valid_integer

SEED_BITS = 64


class Gen(object):

    def __init__(self, random, size):
        check_type(Random, random, 'random')
        check_valid_size(size, 'size')
        self.random = random
        self.__size = size

    @property
    def size(self):
        return self.__size

    @property
    def seed(self):
        if isinstance(self.random, RandomWithSeed):
            return self.random.seed
        return None

    def __repr__(self):
        return 'Gen(%r, size=%d)' % (self.random, self.size)

    def boolean(self):
        return bool(self.random.getrandbits(1))

    def integer_range(self, lower, upper):
        """Draw an integer uniformly from the half open range [lower, upper).

        An empty range always gives lower.

        """
        if upper <= lower:
            return lower
        return self.random.randrange(lower, upper)

    def float_range(self, lower, upper):
        """Draw a float uniformly from the half open range [lower, upper).

        An empty range always gives lower.

        """
        if upper <= lower:
            return lower
        result = lower + self.random.random() * (upper - lower)
        # Rounding can land us exactly on the excluded endpoint.
        if result >= upper:
            return lower
        return result

    def choice(self, values):
        if not values:
            raise InvalidArgument(
                'Cannot choose from an empty sequence %r' % (values,))
        return values[self.integer_range(0, len(values))]


def gen(size=None, seed=None, random=None):
    """Create a Gen for a single generation episode.

    size and seed default to those of the current settings. If random is
    given it is used as the random source directly and seed must not be
    passed.

    """
    if size is None:
        size = settings.default.size
    check_valid_size(size, 'size')
    if random is not None:
        check_type(Random, random, 'random')
        if seed is not None:
            raise InvalidArgument(
                'Cannot pass both seed=%r and random=%r' % (seed, random))
        debug_report(lambda: 'Creating Gen from %r with size=%d' % (
            random, size))
        return Gen(random, size)
    if seed is None:
        seed = settings.default.seed
    if seed is None:
        seed = getrandbits(SEED_BITS)
        verbose_report(lambda: 'Creating Gen with seed=%d size=%d' % (
            seed, size))
    else:
        check_valid_integer(seed, 'seed')
        debug_report(lambda: 'Creating Gen with seed=%d size=%d' % (
            seed, size))
    return Gen(RandomWithSeed(seed), size)
