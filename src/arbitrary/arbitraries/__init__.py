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

"""Functions returning the Arbitrary for each supported kind of value.

Arguments are checked lazily: an invalid Arbitrary raises InvalidArgument
the first time it is validated, which happens on its first generate or
shrink.

"""

from arbitrary.arbitraries.base import Arbitrary, MappedArbitrary
from arbitrary.arbitraries.misc import BoolArbitrary, UnitArbitrary, \
    ResultArbitrary, OptionalArbitrary
from arbitrary.arbitraries.numbers import FloatArbitrary, \
    SignedIntegerArbitrary, UnsignedIntegerArbitrary
from arbitrary.arbitraries.strings import TextArbitrary, CharacterArbitrary
from arbitrary.arbitraries.collections import DictArbitrary, \
    ListArbitrary, TupleArbitrary

__all__ = [
    'Arbitrary',
    'MappedArbitrary',
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
]


def units():
    """Returns an Arbitrary which only ever produces the empty tuple."""
    return UnitArbitrary()


def booleans():
    """Returns an Arbitrary which generates instances of bool.

    True shrinks to False.

    """
    return BoolArbitrary()


def unsigned_integers(bits=64):
    """Returns an Arbitrary which generates integers in [0, 2 ** bits).

    Generated values are below the size of the Gen. bits must be one of
    8, 16, 32 or 64.

    """
    return UnsignedIntegerArbitrary(bits)


def signed_integers(bits=64):
    """Returns an Arbitrary which generates integers that fit in a two's
    complement integer of the given width.

    Generated values lie in [-size, size) for the size of the Gen. bits
    must be one of 8, 16, 32 or 64.

    """
    return SignedIntegerArbitrary(bits)


def floats(width=64):
    """Returns an Arbitrary which generates floats in [-size, size) for the
    size of the Gen.

    width must be 32 or 64. With a width of 32 every generated value is
    exactly representable as a single precision float.

    """
    return FloatArbitrary(width)


def characters():
    """Returns an Arbitrary which generates single printable ASCII
    characters."""
    return CharacterArbitrary()


def optionals(elements):
    """Returns an Arbitrary which generates either None or a value from
    elements."""
    return OptionalArbitrary(elements)


def results(ok, err):
    """Returns an Arbitrary which generates either Ok(x) for x from ok, or
    Err(y) for y from err."""
    return ResultArbitrary(ok, err)


def tuples(*args):
    """Return an Arbitrary which generates a tuple of the same length as
    args by generating the value at index i from args[i].

    e.g. tuples(signed_integers(), signed_integers()) would generate a
    tuple of length two with both values an integer.

    """
    return TupleArbitrary(args)


def lists(elements):
    """Returns a list containing values drawn from elements, with length
    in [0, size) for the size of the Gen."""
    return ListArbitrary(elements)


def dictionaries(keys, values):
    """Generates dictionaries with keys drawn from the keys argument and
    values drawn from the values argument.

    The number of distinct keys is less than the size of the Gen.

    """
    return DictArbitrary(keys, values)


def text():
    """Generates strings of printable ASCII characters, with length in
    [0, size) for the size of the Gen."""
    return TextArbitrary()
