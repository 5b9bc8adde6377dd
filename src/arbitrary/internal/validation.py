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

from arbitrary.errors import InvalidArgument


def check_type(typ, arg, name=''):
    if name:
        name += '='
    if not isinstance(arg, typ):
        if isinstance(typ, type):
            typ_string = typ.__name__
        else:
            typ_string = 'one of %s' % (
                ', '.join(t.__name__ for t in typ))
        raise InvalidArgument('Expected %s but got %s%r (type=%s)'
                              % (typ_string, name, arg, type(arg).__name__))


def check_arbitrary(arg, name=''):
    from arbitrary.arbitraries.base import Arbitrary
    check_type(Arbitrary, arg, name)


def check_valid_integer(value, name=''):
    """Checks that value is an integer and not a boolean.

    Otherwise raises InvalidArgument.
    """
    if isinstance(value, bool):
        raise InvalidArgument(
            'Expected an integer but got %s=%r' % (name, value))
    check_type(int, value, name)


def check_valid_size(value, name):
    """Checks that value is a valid, non-negative size.

    Otherwise raises InvalidArgument.
    """
    check_valid_integer(value, name)
    if value < 0:
        raise InvalidArgument(
            'Invalid size %s=%r < 0' % (name, value))


def check_valid_option(value, options, name):
    if value not in options:
        raise InvalidArgument('Invalid %s=%r. Valid options: %s' % (
            name, value, ', '.join(map(repr, options))))
