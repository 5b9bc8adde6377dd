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

import sys
import math
import struct
from itertools import chain

from arbitrary.shrinking import empty_shrinker
from arbitrary.arbitraries.base import Arbitrary
from arbitrary.internal.validation import check_valid_option

INTEGER_WIDTHS = (8, 16, 32, 64)
FLOAT_WIDTHS = (32, 64)

FLOAT32_MAX = struct.unpack('!f', struct.pack('!I', 0x7f7fffff))[0]

# Generation bounds. Twice the 64-bit bound must not overflow.
FLOAT_BOUNDS = {32: FLOAT32_MAX, 64: sys.float_info.max / 2}


def is_integer(value):
    return isinstance(value, int) and not isinstance(value, bool)


def halve(i):
    """Divide i by two, truncating toward zero as machine integer division
    does."""
    if i >= 0:
        return i // 2
    return -((-i) // 2)


def binary_halvings(x):
    """Yield x - x / 2, x - x / 4, ... for as long as the result is strictly
    closer to zero than x."""
    i = halve(x)
    while abs(x - i) < abs(x):
        yield x - i
        i = halve(i)


def shrink_integer(x, max_value):
    """Shrink x toward zero.

    0 comes first. If x is negative its positive counterpart comes next,
    provided it is no larger than max_value. Then come the binary halvings
    of x, which converge on x from the direction of zero in logarithmically
    many steps.

    """
    if x == 0:
        return empty_shrinker()
    prefix = [0]
    if halve(x) < 0 and -x <= max_value:
        prefix.append(-x)
    return chain(prefix, binary_halvings(x))


class UnsignedIntegerArbitrary(Arbitrary):
    """Integers in [0, 2 ** bits), generated uniformly below the size of the
    Gen."""

    def __init__(self, bits):
        Arbitrary.__init__(self)
        self.bits = bits

    def __repr__(self):
        return 'UnsignedIntegerArbitrary(bits=%r)' % (self.bits,)

    def do_validate(self):
        check_valid_option(self.bits, INTEGER_WIDTHS, 'bits')

    @property
    def max_value(self):
        return 2 ** self.bits - 1

    def could_have_produced(self, value):
        return is_integer(value) and 0 <= value <= self.max_value

    def do_generate(self, gen):
        return gen.integer_range(0, min(gen.size, self.max_value + 1))

    def do_shrink(self, value):
        return shrink_integer(value, self.max_value)


class SignedIntegerArbitrary(Arbitrary):
    """Two's complement integers of the given bit width, generated uniformly
    in [-size, size)."""

    def __init__(self, bits):
        Arbitrary.__init__(self)
        self.bits = bits

    def __repr__(self):
        return 'SignedIntegerArbitrary(bits=%r)' % (self.bits,)

    def do_validate(self):
        check_valid_option(self.bits, INTEGER_WIDTHS, 'bits')

    @property
    def min_value(self):
        return -(2 ** (self.bits - 1))

    @property
    def max_value(self):
        return 2 ** (self.bits - 1) - 1

    def could_have_produced(self, value):
        return is_integer(value) and (
            self.min_value <= value <= self.max_value)

    def do_generate(self, gen):
        bound = min(gen.size, self.max_value + 1)
        return gen.integer_range(-bound, bound)

    def do_shrink(self, value):
        return shrink_integer(value, self.max_value)


def float_of_width(x, width):
    """Round x to the nearest float representable in width bits."""
    if width == 64:
        return float(x)
    return struct.unpack('!f', struct.pack('!f', x))[0]


def float_toward_zero(x, width):
    """Round x to a float of the given width no further from zero than x
    is."""
    result = float_of_width(x, width)
    if abs(result) > abs(x):
        if width == 64:
            return math.nextafter(result, 0.0)
        bits = struct.unpack('!I', struct.pack('!f', result))[0]
        result = struct.unpack('!f', struct.pack('!I', bits - 1))[0]
    return result


def truncate_to_width(x, width):
    """Convert x to a signed integer of the given width, truncating toward
    zero and saturating at the bounds of the width.

    NaN converts to 0.

    """
    if math.isnan(x):
        return 0
    lower = -(2 ** (width - 1))
    upper = 2 ** (width - 1) - 1
    if x <= lower:
        return lower
    if x >= upper:
        return upper
    return int(x)


def simplicity_key(x):
    """Floats closer to zero are simpler, and a positive float is simpler
    than the negative one of the same magnitude."""
    return (abs(x), x < 0)


class FloatArbitrary(Arbitrary):
    """Floats of the given width, generated uniformly in [-size, size).

    Shrinking goes through the signed integer of the same width, so any
    fractional part of the value is lost in the candidates.

    """

    def __init__(self, width):
        Arbitrary.__init__(self)
        self.width = width

    def __repr__(self):
        return 'FloatArbitrary(width=%r)' % (self.width,)

    def do_validate(self):
        check_valid_option(self.width, FLOAT_WIDTHS, 'width')

    def could_have_produced(self, value):
        if not isinstance(value, float):
            return False
        if self.width == 64 or math.isnan(value) or math.isinf(value):
            return True
        return abs(value) <= FLOAT32_MAX and (
            float_of_width(value, 32) == value)

    def do_generate(self, gen):
        if not gen.size:
            return 0.0
        bound = float_toward_zero(
            min(gen.size, FLOAT_BOUNDS[self.width]), self.width)
        return float_toward_zero(gen.float_range(-bound, bound), self.width)

    def do_shrink(self, value):
        """Shrink the truncated integer and convert each candidate back.

        Near the limits of the width a converted candidate can round back
        to value itself, or to something no simpler. Those are skipped.

        """
        integer = truncate_to_width(value, self.width)
        key = simplicity_key(value)
        for i in shrink_integer(integer, 2 ** (self.width - 1) - 1):
            candidate = float_of_width(i, self.width)
            if simplicity_key(candidate) < key:
                yield candidate
