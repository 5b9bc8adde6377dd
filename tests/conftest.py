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

from tests.common.setup import run

run()


@pytest.fixture(scope=u'function', autouse=True)
def restore_type_lookup():
    """Types registered by a test are forgotten once it finishes."""
    from arbitrary import lookup
    saved = dict(lookup._global_type_lookup)
    try:
        yield
    finally:
        lookup._global_type_lookup.clear()
        lookup._global_type_lookup.update(saved)
