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

from arbitrary.arbitraries.base import Arbitrary, MappedArbitrary
from arbitrary.arbitraries.collections import ListArbitrary

# Printable ASCII, from space to tilde.
ALPHABET = ''.join(chr(c) for c in range(0x20, 0x7f))


class CharacterArbitrary(Arbitrary):
    """An Arbitrary which generates single character strings, uniformly
    chosen from ALPHABET.

    Any single character may be shrunk, but none has anything simpler.

    """

    def __repr__(self):
        return 'CharacterArbitrary()'

    def could_have_produced(self, value):
        return isinstance(value, str) and len(value) == 1

    def do_generate(self, gen):
        return gen.choice(ALPHABET)


class TextArbitrary(MappedArbitrary):
    """An Arbitrary for strings, defined as a list of characters."""

    def __init__(self):
        super(TextArbitrary, self).__init__(
            ListArbitrary(CharacterArbitrary())
        )

    def __repr__(self):
        return 'TextArbitrary()'

    @property
    def has_immutable_data(self):
        return True

    def pack(self, characters):
        return ''.join(characters)

    def unpack(self, value):
        return list(value)

    def could_have_produced(self, value):
        return isinstance(value, str)
