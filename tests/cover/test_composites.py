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

import pytest
from hypothesis import given

from arbitrary import Ok, Err, text, units, tuples, results, booleans, \
    optionals, signed_integers, lists
from arbitrary.errors import InvalidArgument
from tests.common.debug import gens, shrinks, assert_shrinks_to, \
    assert_shrinks_to_set


def test_unit_is_the_empty_tuple():
    assert units().example() == ()
    assert shrinks(units(), ()) == []


def test_booleans_shrink_to_false():
    assert_shrinks_to(booleans(), True, [False])
    assert_shrinks_to(booleans(), False, [])


def test_booleans_are_not_integers():
    with pytest.raises(InvalidArgument):
        shrinks(booleans(), 1)


def test_absent_optional_does_not_shrink():
    assert shrinks(optionals(booleans()), None) == []


def test_present_optional_shrinks_to_absent_first():
    assert_shrinks_to(optionals(booleans()), True, [None, False])
    assert_shrinks_to(optionals(booleans()), False, [None])
    assert_shrinks_to(optionals(units()), (), [None])


def test_optional_values_shrink_in_turn():
    assert_shrinks_to(
        optionals(signed_integers()), -5, [None, 0, 5, -3, -4])


@given(gens())
def test_optionals_generate_elements_or_none(g):
    x = optionals(signed_integers()).generate(g)
    assert x is None or isinstance(x, int)


def test_optionals_generate_both_cases():
    seen = {optionals(booleans()).example(seed=i) is None for i in range(50)}
    assert seen == {True, False}


def test_results_keep_their_arm():
    r = results(booleans(), booleans())
    assert_shrinks_to(r, Ok(True), [Ok(False)])
    assert_shrinks_to(r, Err(True), [Err(False)])
    assert_shrinks_to(r, Ok(False), [])
    assert_shrinks_to(r, Err(False), [])


def test_results_shrink_payloads_with_their_own_arbitrary():
    r = results(signed_integers(), text())
    assert_shrinks_to(r, Ok(5), [Ok(0), Ok(3), Ok(4)])
    assert_shrinks_to(r, Err('ab'), [Err(''), Err('b'), Err('a')])


def test_results_reject_unwrapped_values():
    with pytest.raises(InvalidArgument):
        shrinks(results(booleans(), booleans()), True)


def test_results_check_the_arm_payload():
    with pytest.raises(InvalidArgument):
        shrinks(results(booleans(), text()), Err(True))


def test_results_generate_both_arms():
    r = results(booleans(), booleans())
    seen = {type(r.example(seed=i)) for i in range(50)}
    assert seen == {Ok, Err}


def test_results_compare_by_arm_and_value():
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert Ok(1).is_ok()
    assert Err(1).is_err()
    assert repr(Err('x')) == "Err('x')"


def test_pairs_shrink_each_side_in_turn():
    t = tuples(booleans(), booleans())
    assert_shrinks_to_set(t, (False, False), [])
    assert_shrinks_to_set(t, (True, False), [(False, False)])
    assert_shrinks_to_set(t, (True, True), [(False, True), (True, False)])


def test_tuple_shrinks_first_element_before_the_rest():
    t = tuples(booleans(), booleans(), booleans(), booleans())
    assert_shrinks_to(t, (True, True, False, True), [
        (False, True, False, True),
        (True, False, False, True),
        (True, True, False, False),
    ])


def test_tuple_shrink_does_not_take_a_cross_product():
    t = tuples(signed_integers(), signed_integers())
    assert_shrinks_to(t, (5, 5), [
        (0, 5), (3, 5), (4, 5), (5, 0), (5, 3), (5, 4),
    ])


def test_singleton_tuples_shrink_their_element():
    assert_shrinks_to(tuples(booleans()), (True,), [(False,)])


@pytest.mark.parametrize('arity', range(1, 13))
def test_supports_conventional_arities(arity):
    t = tuples(*[booleans()] * arity)
    value = (True,) * arity
    candidates = shrinks(t, value)
    assert len(candidates) == arity
    for i, c in enumerate(candidates):
        assert c == value[:i] + (False,) + value[i + 1:]


def test_empty_tuples_are_invalid():
    with pytest.raises(InvalidArgument):
        tuples().validate()


def test_tuple_elements_must_be_arbitraries():
    with pytest.raises(InvalidArgument):
        tuples(booleans(), int).validate()


@pytest.mark.parametrize('value', [(True,), (True, 1), [True, True], True])
def test_tuples_check_shape(value):
    with pytest.raises(InvalidArgument):
        shrinks(tuples(booleans(), booleans()), value)


@given(gens())
def test_tuples_generate_in_positional_order(g):
    t = tuples(signed_integers(), text(), booleans())
    x = t.generate(g)
    assert isinstance(x[0], int)
    assert isinstance(x[1], str)
    assert isinstance(x[2], bool)


def test_tuple_candidates_do_not_share_mutable_elements():
    t = tuples(lists(booleans()), booleans())
    value = ([True], True)
    for c in t.shrink(value):
        c[0].append(False)
    assert value == ([True], True)
