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

from copy import deepcopy

from arbitrary.gen import gen as make_gen
from arbitrary.errors import InvalidArgument
from arbitrary.shrinking import empty_shrinker


def function_name(f):
    return getattr(f, '__name__', None) or repr(f)


class Arbitrary(object):
    """An Arbitrary is an object that knows how to generate and shrink
    values of a particular type.

    Generation draws from a Gen and so depends on its random source and
    size. Shrinking depends only on the value it is given: it returns a
    finite iterator of values of the same type that are in some sense
    simpler, and calling it again on the same value gives the same
    sequence.

    Subclasses implement do_generate, and do_shrink if they have any notion
    of a simpler value. The public generate and shrink methods validate the
    Arbitrary first, so bad arguments are only reported once it is actually
    used.

    """

    validate_called = False

    # A subclass should override this if its values are mutable and must be
    # copied before it is safe to hand them to unknown code.
    has_immutable_data = True

    def __init__(self):
        pass

    def generate(self, gen):
        """Produce a value from the random source and size of gen."""
        self.validate()
        return self.do_generate(gen)

    def shrink(self, value):
        """Return an iterator over values that are simpler than value.

        Raises InvalidArgument if value is not something this Arbitrary
        could have produced.

        """
        self.validate()
        if not self.could_have_produced(value):
            raise InvalidArgument(
                '%r could not have been produced by %r' % (value, self))
        return self.do_shrink(value)

    def could_have_produced(self, value):
        """Is this a value that could have resulted from generate on this
        Arbitrary."""
        raise NotImplementedError(
            '%s.could_have_produced()' % (self.__class__.__name__,))

    def copy(self, value):
        """Return a version of value such that if it is mutated this will not
        be reflected in value. If value is immutable it is perfectly acceptable
        to just return value itself."""
        if self.has_immutable_data:
            return value
        else:
            return deepcopy(value)

    def example(self, size=None, seed=None):
        """Provide an example of the sort of value that this Arbitrary
        generates.

        This is intended for interactive use, to get a feel for what the
        Arbitrary produces. size and seed default to the current settings.

        """
        return self.generate(make_gen(size=size, seed=seed))

    def map(self, pack, unpack):
        """Returns a new Arbitrary whose values are pack(x) for x generated
        by this one.

        unpack must invert pack: shrinking a value v of the new Arbitrary
        shrinks unpack(v) with this one and packs each candidate.

        """
        return MappedArbitrary(self, pack=pack, unpack=unpack)

    def validate(self):
        """Throw an exception if the Arbitrary is not valid.

        This can happen due to lazy construction.

        """
        if self.validate_called:
            return
        try:
            self.validate_called = True
            self.do_validate()
        except Exception:
            self.validate_called = False
            raise

    def do_validate(self):
        pass

    def do_generate(self, gen):
        raise NotImplementedError('%s.do_generate' % (type(self).__name__,))

    def do_shrink(self, value):
        return empty_shrinker()


class MappedArbitrary(Arbitrary):
    """An Arbitrary which is defined purely by conversion to and from another
    Arbitrary.

    Its distribution and shrinking come from that other Arbitrary.

    """

    def __init__(self, arbitrary, pack=None, unpack=None):
        Arbitrary.__init__(self)
        self.mapped_arbitrary = arbitrary
        if pack is not None:
            self.pack = pack
        if unpack is not None:
            self.unpack = unpack

    def __repr__(self):
        return '%r.map(%s, %s)' % (
            self.mapped_arbitrary,
            function_name(self.pack), function_name(self.unpack),
        )

    @property
    def has_immutable_data(self):
        return self.mapped_arbitrary.has_immutable_data

    def do_validate(self):
        self.mapped_arbitrary.validate()

    def pack(self, x):
        """Take a value produced by the underlying mapped_arbitrary and turn
        it into a value suitable for outputting from this Arbitrary."""
        raise NotImplementedError(
            '%s.pack()' % (self.__class__.__name__))

    def unpack(self, x):
        """Take a value of this Arbitrary and turn it back into one the
        underlying mapped_arbitrary could have produced."""
        raise NotImplementedError(
            '%s.unpack()' % (self.__class__.__name__))

    def could_have_produced(self, value):
        try:
            unpacked = self.unpack(value)
        except (TypeError, ValueError, AttributeError):
            return False
        return self.mapped_arbitrary.could_have_produced(unpacked)

    def do_generate(self, gen):
        return self.pack(self.mapped_arbitrary.generate(gen))

    def do_shrink(self, value):
        return map(
            self.pack, self.mapped_arbitrary.shrink(self.unpack(value)))
