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

class ArbitraryException(Exception):

    """Generic parent class for exceptions thrown by Arbitrary."""
    pass


class InvalidArgument(ArbitraryException, TypeError):

    """Used to indicate that the arguments to an Arbitrary function were in
    some manner incorrect."""


class ResolutionFailed(InvalidArgument):

    """Raised by from_type if it cannot find an Arbitrary for the type it was
    asked about."""


class InvalidState(ArbitraryException):

    """The system is not in a state where you were allowed to do that."""
