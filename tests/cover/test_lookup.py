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

import typing

import pytest

from arbitrary import Ok, Err, Result, text, from_type, \
    register_type_arbitrary, signed_integers
from arbitrary.errors import InvalidArgument, ResolutionFailed
from arbitrary.arbitraries import Arbitrary, MappedArbitrary
from arbitrary.arbitraries.misc import BoolArbitrary, UnitArbitrary, \
    ResultArbitrary, OptionalArbitrary
from arbitrary.arbitraries.numbers import FloatArbitrary, \
    SignedIntegerArbitrary
from arbitrary.arbitraries.strings import TextArbitrary
from arbitrary.arbitraries.collections import DictArbitrary, \
    ListArbitrary, TupleArbitrary


@pytest.mark.parametrize(('thing', 'kind'), [
    (bool, BoolArbitrary),
    (int, SignedIntegerArbitrary),
    (float, FloatArbitrary),
    (str, TextArbitrary),
    (list[int], ListArbitrary),
    (typing.List[int], ListArbitrary),
    (dict[str, int], DictArbitrary),
    (tuple[int, str], TupleArbitrary),
    (tuple[()], UnitArbitrary),
    (typing.Optional[int], OptionalArbitrary),
    (int | None, OptionalArbitrary),
    (Result[int, str], ResultArbitrary),
])
def test_resolves_supported_types(thing, kind):
    assert isinstance(from_type(thing), kind)


def test_resolves_nested_types():
    a = from_type(dict[str, list[tuple[bool, typing.Optional[float]]]])
    value = {'a': [(True, None), (False, 1.5)]}
    assert a.could_have_produced(value)
    assert not a.could_have_produced({'a': [(True, 'x')]})


def test_resolved_arbitraries_generate_values_of_the_type():
    value = from_type(Result[int, str]).example(seed=0)
    assert isinstance(value, (Ok, Err))


@pytest.mark.parametrize('thing', [
    list, dict, object, tuple[int, ...], typing.Union[int, str],
    typing.Callable[[int], int], Result,
])
def test_unresolvable_types_fail(thing):
    with pytest.raises(ResolutionFailed):
        from_type(thing)


@pytest.mark.parametrize('thing', [1, 'int', None])
def test_non_types_are_invalid(thing):
    with pytest.raises(InvalidArgument):
        from_type(thing)


class Celsius(object):

    def __init__(self, degrees):
        self.degrees = degrees

    def __eq__(self, other):
        return isinstance(other, Celsius) and self.degrees == other.degrees

    def __repr__(self):
        return 'Celsius(%r)' % (self.degrees,)


def celsius():
    return MappedArbitrary(
        signed_integers(), pack=Celsius, unpack=lambda c: c.degrees)


def test_can_register_custom_types():
    register_type_arbitrary(Celsius, celsius())
    a = from_type(list[Celsius])
    assert list(a.shrink([Celsius(5)]))[1] == [Celsius(0)]


def test_can_register_functions_of_the_type():
    register_type_arbitrary(Celsius, lambda t: celsius())
    assert isinstance(from_type(Celsius).example(seed=0), Celsius)


def test_registration_can_override_builtins():
    register_type_arbitrary(str, text().map(str.upper, str.lower))
    assert from_type(str).example(seed=1) == \
        from_type(str).example(seed=1).upper()


def test_registered_types_are_forgotten_between_tests():
    with pytest.raises(ResolutionFailed):
        from_type(Celsius)


def test_registering_requires_a_type():
    with pytest.raises(InvalidArgument):
        register_type_arbitrary('Celsius', celsius())


def test_registering_requires_an_arbitrary():
    with pytest.raises(InvalidArgument):
        register_type_arbitrary(Celsius, 3)


def test_lookup_values_are_arbitraries():
    from arbitrary.lookup import _global_type_lookup
    assert all(isinstance(v, Arbitrary) for v in _global_type_lookup.values())
