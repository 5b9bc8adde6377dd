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

from arbitrary.errors import InvalidArgument
from arbitrary.shrinking import empty_shrinker, single_shrinker
from arbitrary.arbitraries.base import Arbitrary, MappedArbitrary
from arbitrary.internal.validation import check_arbitrary


class TupleArbitrary(Arbitrary):
    """An Arbitrary responsible for fixed length tuples based on
    heterogenous Arbitraries for each of their elements.

    Shrinking varies the first element with the rest held fixed, then
    varies the rest as a tuple of its own with the first held fixed. It
    does not try every combination of the two.

    """

    def __init__(self, arbitraries):
        Arbitrary.__init__(self)
        self.element_arbitraries = tuple(arbitraries)
        if len(self.element_arbitraries) > 1:
            self.rest_arbitrary = TupleArbitrary(self.element_arbitraries[1:])
        else:
            self.rest_arbitrary = None

    def __repr__(self):
        if len(self.element_arbitraries) == 1:
            tuple_string = '%s,' % (repr(self.element_arbitraries[0]),)
        else:
            tuple_string = ', '.join(map(repr, self.element_arbitraries))
        return 'TupleArbitrary((%s))' % (
            tuple_string,
        )

    @property
    def has_immutable_data(self):
        return all(e.has_immutable_data for e in self.element_arbitraries)

    def do_validate(self):
        if not self.element_arbitraries:
            raise InvalidArgument('Cannot create a tuple of no elements')
        for i, e in enumerate(self.element_arbitraries):
            check_arbitrary(e, 'elements[%d]' % (i,))
            e.validate()

    def could_have_produced(self, value):
        return (
            isinstance(value, tuple) and
            len(value) == len(self.element_arbitraries) and
            all(
                e.could_have_produced(v)
                for e, v in zip(self.element_arbitraries, value)
            )
        )

    def do_generate(self, gen):
        return tuple(
            e.generate(gen) for e in self.element_arbitraries
        )

    def do_shrink(self, value):
        first_arbitrary = self.element_arbitraries[0]
        first, rest = value[0], value[1:]
        vary_first = (
            (shrunk,) + self.rest_copy(rest)
            for shrunk in first_arbitrary.shrink(first)
        )
        if self.rest_arbitrary is None:
            return vary_first
        vary_rest = (
            (first_arbitrary.copy(first),) + shrunk
            for shrunk in self.rest_arbitrary.shrink(rest)
        )
        return chain(vary_first, vary_rest)

    def rest_copy(self, rest):
        if self.rest_arbitrary is None:
            return ()
        return self.rest_arbitrary.copy(rest)


def run_removals(xs):
    """Yield every list obtained by deleting a single contiguous run of k
    elements from xs, for k = len(xs) // 2, len(xs) // 4, ..., 1."""
    k = len(xs) // 2
    while k > 0:
        for start in range(len(xs) - k + 1):
            yield xs[:start] + xs[start + k:]
        k //= 2


class ListArbitrary(Arbitrary):
    """An Arbitrary for lists whose elements are all drawn from a single
    Arbitrary.

    The length is uniform in [0, size).

    """

    has_immutable_data = False

    def __init__(self, element_arbitrary):
        Arbitrary.__init__(self)
        self.element_arbitrary = element_arbitrary

    def __repr__(self):
        return 'ListArbitrary(%r)' % (self.element_arbitrary,)

    def do_validate(self):
        check_arbitrary(self.element_arbitrary, 'elements')
        self.element_arbitrary.validate()

    def could_have_produced(self, value):
        return isinstance(value, list) and all(
            self.element_arbitrary.could_have_produced(v) for v in value)

    def do_generate(self, gen):
        length = gen.integer_range(0, gen.size)
        return [
            self.element_arbitrary.generate(gen) for _ in range(length)
        ]

    def do_shrink(self, value):
        """Shrink in three phases.

        First comes the empty list. Then come the lists with a run of
        elements removed, longest runs first, which quickly cuts a long
        list down to the length that matters. Finally each element is
        shrunk in place with the others held fixed.

        """
        if not value:
            return empty_shrinker()
        return chain(
            single_shrinker([]),
            map(self.copy_elements, run_removals(value)),
            self.element_shrinks(value),
        )

    def copy_elements(self, xs):
        if self.element_arbitrary.has_immutable_data:
            return list(xs)
        return [self.element_arbitrary.copy(x) for x in xs]

    def element_shrinks(self, xs):
        for i, x in enumerate(xs):
            for shrunk in self.element_arbitrary.shrink(x):
                result = self.copy_elements(xs)
                result[i] = shrunk
                yield result


class DictArbitrary(MappedArbitrary):
    """An Arbitrary for dicts, defined as a list of key, value pairs.

    Later pairs overwrite earlier ones with an equal key, so generated
    dicts may be shorter than the list they came from.

    """

    has_immutable_data = False

    def __init__(self, keys, values):
        super(DictArbitrary, self).__init__(
            ListArbitrary(TupleArbitrary((keys, values)))
        )
        self.keys = keys
        self.values = values

    def __repr__(self):
        return 'DictArbitrary(%r, %r)' % (self.keys, self.values)

    def do_validate(self):
        check_arbitrary(self.keys, 'keys')
        check_arbitrary(self.values, 'values')
        if not self.keys.has_immutable_data:
            raise InvalidArgument(
                'keys=%r produces mutable values, which cannot be used as '
                'dict keys' % (self.keys,))
        super(DictArbitrary, self).do_validate()

    def pack(self, pairs):
        return dict(pairs)

    def unpack(self, value):
        return list(value.items())

    def could_have_produced(self, value):
        return isinstance(value, dict) and super(
            DictArbitrary, self).could_have_produced(value)
