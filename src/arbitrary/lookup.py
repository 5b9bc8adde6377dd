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

"""Resolution of Python types to the Arbitrary that produces them."""

import typing
from types import UnionType

import arbitrary.arbitraries as arb
from arbitrary.types import Result
from arbitrary.errors import InvalidArgument, ResolutionFailed
from arbitrary.reporting import debug_report
from arbitrary.arbitraries.base import Arbitrary

_global_type_lookup = {
    bool: arb.booleans(),
    int: arb.signed_integers(),
    float: arb.floats(),
    str: arb.text(),
}


def is_a_type(thing):
    """Return True if thing is a type or a generic type like thing."""
    return isinstance(thing, type) or typing.get_origin(thing) is not None


def register_type_arbitrary(custom_type, arbitrary):
    """Add an entry to the global type-to-Arbitrary lookup used by
    from_type.

    ``arbitrary`` may be an Arbitrary, or a function that takes a type and
    returns an Arbitrary (useful for generic types).

    """
    if not isinstance(custom_type, type):
        raise InvalidArgument('custom_type=%r must be a type' % (custom_type,))
    if not (isinstance(arbitrary, Arbitrary) or callable(arbitrary)):
        raise InvalidArgument(
            'arbitrary=%r must be an Arbitrary, or a function that takes '
            'a generic type and returns a specific Arbitrary' % (arbitrary,))
    _global_type_lookup[custom_type] = arbitrary


def from_typing_type(thing):
    origin = typing.get_origin(thing)
    args = typing.get_args(thing)
    if origin is typing.Union or origin is UnionType:
        present = [a for a in args if a is not type(None)]
        if len(present) == 1 and len(present) < len(args):
            return arb.optionals(from_type(present[0]))
        raise ResolutionFailed(
            'Could not resolve %r: only unions of a single type with None '
            'are supported' % (thing,))
    if origin is list and len(args) == 1:
        return arb.lists(from_type(args[0]))
    if origin is dict and len(args) == 2:
        return arb.dictionaries(from_type(args[0]), from_type(args[1]))
    if origin is tuple:
        if args in ((), ((),)):
            return arb.units()
        if Ellipsis in args:
            raise ResolutionFailed(
                'Could not resolve %r: variable length tuples are not '
                'supported, use a list instead' % (thing,))
        return arb.tuples(*map(from_type, args))
    if origin is Result and len(args) == 2:
        return arb.results(from_type(args[0]), from_type(args[1]))
    raise ResolutionFailed(
        'Could not resolve %r to an Arbitrary; consider using '
        'register_type_arbitrary' % (thing,))


def from_type(thing):
    """Looks up the appropriate Arbitrary for the given type.

    The resolution logic tries these options in turn:

    1. If ``thing`` is in the default lookup mapping or user-registered
       lookup, return the corresponding Arbitrary. The default lookup covers
       bool, int, float and str.
    2. If ``thing`` is a parametrised generic (``list[int]``,
       ``typing.Optional[str]``, ``Result[int, str]`` and so on), resolve
       its arguments and combine them structurally. ``tuple[()]`` is the
       unit type.

    Anything else raises ResolutionFailed.

    """
    if not is_a_type(thing):
        raise InvalidArgument('thing=%r must be a type' % (thing,))
    if thing in _global_type_lookup:
        result = _global_type_lookup[thing]
        if not isinstance(result, Arbitrary):
            result = result(thing)
    elif typing.get_origin(thing) is not None:
        result = from_typing_type(thing)
    else:
        raise ResolutionFailed(
            'Could not resolve %r to an Arbitrary; consider using '
            'register_type_arbitrary' % (thing,))
    debug_report(lambda: 'Resolved %r to %r' % (thing, result))
    return result
