#!/usr/bin/env python
#
# polyform - Copyright (C) Polyform contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

import unittest

from polyform.util import set_flag
from polyform.util import is_number
from polyform.util import is_numeric
from polyform.util import to_number
from polyform.util import loose_eq
from polyform.util import strict_eq
from polyform.util import has_backend


class TestFlags(unittest.TestCase):
    def test_set_flag(self):
        assert set_flag(0, 4, True) == 4
        assert set_flag(5, 4, False) == 1
        assert set_flag(5, 4, 1) == 5
        assert set_flag(3, 1 | 2, None) == 0


class TestNumbers(unittest.TestCase):
    def test_is_number(self):
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number('1')

    def test_is_numeric(self):
        for s in ('1', '-1', '+1.5', '.5', '5.', '1e3', ' 42 ', '5.0'):
            assert is_numeric(s), s

        for s in ('', 'abc', '1a', '0x1A', '1e', '.', None):
            assert not is_numeric(s), s

    def test_to_number(self):
        assert to_number('4') == 4
        assert isinstance(to_number('4'), int)
        assert isinstance(to_number('5.0'), float)
        assert to_number('1e2') == 100.0


class TestEquality(unittest.TestCase):
    def test_strict(self):
        assert strict_eq(1, 1)
        assert not strict_eq(1, '1')
        assert not strict_eq(1, 1.0)
        assert not strict_eq(1, True)

    def test_loose_numbers(self):
        assert loose_eq(1, '1')
        assert loose_eq('1.0', 1)
        assert loose_eq(1, 1.0)
        assert not loose_eq(1, '2')
        assert not loose_eq('abc', 1)

    def test_loose_strings(self):
        assert loose_eq('active', 'active')
        assert not loose_eq('active', 'inactive')

    def test_loose_numeric_strings(self):
        assert loose_eq('01', '1')
        assert loose_eq('10', '1e1')
        assert loose_eq(' 1', '1.0')
        assert not loose_eq('1', '2')
        assert not loose_eq('abc', 'ABC')
        assert not loose_eq('1', '1a')

    def test_loose_none(self):
        assert loose_eq(None, None)
        assert loose_eq(None, '')
        assert loose_eq(None, 0)
        assert not loose_eq(None, '0')
        assert not loose_eq(None, 'x')
        assert not loose_eq(1, None)

    def test_loose_bool(self):
        assert loose_eq(True, 'x')
        assert loose_eq(False, 0)
        assert not loose_eq(True, 0)


class TestBackend(unittest.TestCase):
    def test_has_backend(self):
        assert has_backend('lxml.etree')
        assert not has_backend('polyform_nonexistent_backend')
        assert not has_backend('polyform_nonexistent.sub')


if __name__ == '__main__':
    unittest.main()
