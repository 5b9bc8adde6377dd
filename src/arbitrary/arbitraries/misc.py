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

from arbitrary.types import Ok, Err
from arbitrary.shrinking import empty_shrinker, single_shrinker
from arbitrary.arbitraries.base import Arbitrary
from arbitrary.internal.validation import check_arbitrary


class UnitArbitrary(Arbitrary):
    """An Arbitrary which always produces the empty tuple."""

    def __repr__(self):
        return 'UnitArbitrary()'

    def could_have_produced(self, value):
        return value == () and isinstance(value, tuple)

    def do_generate(self, gen):
        return ()


class BoolArbitrary(Arbitrary):
    """An Arbitrary that produces Booleans by flipping a fair coin."""

    def __repr__(self):
        return 'BoolArbitrary()'

    def could_have_produced(self, value):
        return isinstance(value, bool)

    def do_generate(self, gen):
        return gen.boolean()

    def do_shrink(self, value):
        if value:
            return single_shrinker(False)
        return empty_shrinker()


class OptionalArbitrary(Arbitrary):
    """An Arbitrary which produces either None or a value of the wrapped
    Arbitrary, each with even odds.

    A present value is represented by itself rather than wrapped, so an
    element Arbitrary that can itself produce None makes the two cases
    indistinguishable. Such values are treated as absent.

    """

    def __init__(self, element_arbitrary):
        Arbitrary.__init__(self)
        self.element_arbitrary = element_arbitrary

    def __repr__(self):
        return 'OptionalArbitrary(%r)' % (self.element_arbitrary,)

    @property
    def has_immutable_data(self):
        return self.element_arbitrary.has_immutable_data

    def do_validate(self):
        check_arbitrary(self.element_arbitrary, 'elements')
        self.element_arbitrary.validate()

    def could_have_produced(self, value):
        return value is None or self.element_arbitrary.could_have_produced(
            value)

    def do_generate(self, gen):
        if gen.boolean():
            return None
        return self.element_arbitrary.generate(gen)

    def do_shrink(self, value):
        if value is None:
            return empty_shrinker()
        return chain(
            single_shrinker(None), self.element_arbitrary.shrink(value))


class ResultArbitrary(Arbitrary):
    """An Arbitrary for the two-armed union of Ok and Err values.

    Each arm is picked with even odds and its payload generated by that
    arm's own Arbitrary. Shrinking never moves a value across arms.

    """

    def __init__(self, ok_arbitrary, err_arbitrary):
        Arbitrary.__init__(self)
        self.ok_arbitrary = ok_arbitrary
        self.err_arbitrary = err_arbitrary

    def __repr__(self):
        return 'ResultArbitrary(%r, %r)' % (
            self.ok_arbitrary, self.err_arbitrary)

    @property
    def has_immutable_data(self):
        return (
            self.ok_arbitrary.has_immutable_data and
            self.err_arbitrary.has_immutable_data
        )

    def do_validate(self):
        check_arbitrary(self.ok_arbitrary, 'ok')
        check_arbitrary(self.err_arbitrary, 'err')
        self.ok_arbitrary.validate()
        self.err_arbitrary.validate()

    def could_have_produced(self, value):
        if isinstance(value, Ok):
            return self.ok_arbitrary.could_have_produced(value.value)
        if isinstance(value, Err):
            return self.err_arbitrary.could_have_produced(value.value)
        return False

    def do_generate(self, gen):
        if gen.boolean():
            return Ok(self.ok_arbitrary.generate(gen))
        return Err(self.err_arbitrary.generate(gen))

    def do_shrink(self, value):
        if isinstance(value, Ok):
            return map(Ok, self.ok_arbitrary.shrink(value.value))
        return map(Err, self.err_arbitrary.shrink(value.value))
