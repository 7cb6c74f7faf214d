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

from xml.dom import minidom

from lxml import etree

from polyform.model import DataObject
from polyform.util.record import OrderedRecord


class TestDetect(unittest.TestCase):
    def setUp(self):
        self.obj = DataObject()

    def test_string_types(self):
        d = self.obj.detect_string_type

        assert d('<foo/>') == 'xml_string'
        assert d('  \n<foo/>') == 'xml_string'
        assert d('{"a": 1}') == 'json'
        assert d('[1, 2]') == 'json'
        assert d('---\na: 1\n') == 'yaml'
        assert d('%YAML 1.1\n---\n') == 'yaml'
        assert d('# comment\na: 1') == 'yaml'
        assert d('hello') is None
        assert d('') is None

    def test_arrays(self):
        for data in ({}, [], (), OrderedRecord()):
            assert self.obj.detect_data_type(data) == 'array'

    def test_strings(self):
        assert self.obj.detect_data_type(' {"a": 1}') == 'json'
        assert self.obj.detect_data_type(b' <a/>') == 'xml_string'
        assert self.obj.detect_data_type(b'') is None

    def test_xml_types(self):
        element = etree.fromstring('<a/>')
        assert self.obj.detect_data_type(element) == 'simple_xml'
        assert self.obj.detect_data_type(etree.ElementTree(element)) == \
                                                                     'dom_node'

        doc = minidom.parseString('<a/>')
        assert self.obj.detect_data_type(doc) == 'dom_node'
        assert self.obj.detect_data_type(doc.documentElement) == 'dom_node'

    def test_objectified(self):
        from lxml import objectify

        element = objectify.fromstring('<a><b>1</b></a>')
        assert self.obj.detect_data_type(element) == 'objectified'

    def test_tree_like(self):
        class Tree(object):
            def getroot(self):
                return etree.fromstring('<a/>')

        class NotTree(object):
            def getroot(self):
                return None

        assert self.obj.detect_data_type(Tree()) == 'dom_node'
        assert self.obj.detect_data_type(NotTree()) is None

    def test_unknown(self):
        assert self.obj.detect_data_type(None) is None
        assert self.obj.detect_data_type(42) is None
        assert self.obj.detect_data_type(object()) is None

    def test_override(self):
        class CsvObject(DataObject):
            def detect_string_type(self, string):
                if ',' in string:
                    return 'csv'
                return super(CsvObject, self).detect_string_type(string)

        assert CsvObject().detect_data_type('a,b') == 'csv'
        assert CsvObject().detect_data_type('[1]') == 'json'


if __name__ == '__main__':
    unittest.main()
