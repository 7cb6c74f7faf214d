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

from polyform.error import LoadError
from polyform.error import PolyformError
from polyform.error import KeyNotFoundError
from polyform.error import UnhandledFormatError
from polyform.error import UnsupportedFormatError
from polyform.error import MissingCapabilityError
from polyform.model import Fault
from polyform.model import Arrayish
from polyform.model import Container
from polyform.model import DataObject
from polyform.decorator import loader
from polyform.decorator import dumper
from polyform.capability import Initializable
from polyform.capability import PrepLoadable
from polyform.capability import PostLoadable
from polyform.capability import DefaultPopulatable
from polyform.util.record import OrderedRecord


class CsvObject(Arrayish):
    @loader('csv')
    def load_csv(self, data, opts=None):
        if data == 'fail':
            return False

        if data == 'inplace':
            self.data = OrderedRecord(['in', 'place'])
            return None

        if data == 'true':
            self.data = OrderedRecord(['true'])
            return True

        if data == 'scalar':
            return 'scalar'

        return data.split(',')

    @dumper('csv')
    def to_csv(self, opts=None):
        return ','.join([str(v) for k, v in self])


class Hooked(Arrayish, Initializable, PrepLoadable, PostLoadable,
                                                          DefaultPopulatable):
    def data_init(self, opts):
        self.calls = [('init', len(self.data))]

    def data_prep(self, data, opts):
        self.calls.append(('prep', data))
        if isinstance(data, str) and '=' in data:
            k, v = data.split('=')
            return {k: v}
        return data

    def data_post(self, opts):
        self.calls.append(('post', len(self.data)))

    def data_defaults(self, opts):
        self.calls.append(('defaults',))
        self.set('name', 'default')


class TestLoad(unittest.TestCase):
    def test_array(self):
        obj = DataObject({'id': 1, 'hello': 'World'})

        assert obj.data['id'] == 1
        assert obj.data['hello'] == 'World'
        assert isinstance(obj.data, OrderedRecord)

    def test_unsupported(self):
        with self.assertRaises(UnsupportedFormatError) as cm:
            DataObject(42)

        assert cm.exception.faultcode == 'Client.UnsupportedFormat'
        assert cm.exception.detail == 'int'

        self.assertRaises(UnsupportedFormatError, DataObject, 'hello')

    def test_unhandled(self):
        with self.assertRaises(UnhandledFormatError) as cm:
            DataObject('a,b', type='csv')

        assert cm.exception.tag == 'csv'
        assert cm.exception.faultcode == 'Server.UnhandledFormat'

    def test_explicit_type(self):
        obj = DataObject('a: 1', type='yaml')
        assert obj.data == {'a': 1}

        obj = CsvObject('a,b', type='csv')
        assert obj.data == ['a', 'b']

    def test_explicit_type_not_redetected(self):
        obj = CsvObject()
        obj.load('[1,2]', {'type': 'csv'})

        assert obj.data == ['[1', '2]']

    def test_loader_failure_keeps_state(self):
        obj = CsvObject({'a': 1})

        self.assertRaises(LoadError, obj.load, 'fail', {'type': 'csv'})
        assert obj.data == {'a': 1}

    def test_loader_in_place(self):
        obj = CsvObject({'a': 1})

        obj.load('inplace', {'type': 'csv'})
        assert obj.data == ['in', 'place']

        obj.load('true', {'type': 'csv'})
        assert obj.data == ['true']

    def test_loader_bad_result(self):
        obj = CsvObject({'a': 1})

        self.assertRaises(LoadError, obj.load, 'scalar', {'type': 'csv'})
        assert obj.data == {'a': 1}

    def test_clear(self):
        c = Container([{'id': 1}])
        c.load([{'id': 2}])
        assert len(c) == 2

        c.load([{'id': 3}], {'clear': True})
        assert len(c) == 1
        assert c[3] == {'id': 3}
        assert c[1] is None

    def test_reload_replaces(self):
        obj = Arrayish({'a': 1})
        obj.load({'b': 2})

        assert obj.data == {'b': 2}


class TestConstruction(unittest.TestCase):
    def test_parent(self):
        p = Arrayish()

        assert Arrayish({'a': 1}, {'parent': p}).parent is p
        assert Arrayish({'a': 1}, parent=p).parent is p
        assert Arrayish().parent is None

    def test_newconst(self):
        class Bar(Arrayish):
            newconst = True

        p = Arrayish()
        bar = Bar({'data': {'a': 1}, 'parent': p})

        assert bar.data == {'a': 1}
        assert bar.parent is p

        bar = Bar({'a': 1}, {})
        assert bar.data == {'a': 1}

    def test_no_newconst(self):
        obj = Arrayish({'data': {'a': 1}})

        assert obj['data'] == {'a': 1}

    def test_constprops(self):
        class Baz(Arrayish):
            constprops = ('color',)
            color = None

        baz = Baz({'a': 1}, {'color': 'red', 'size': 3})
        assert baz.color == 'red'
        assert not hasattr(baz, 'size')

        assert Baz().color is None

    def test_constprops_mapping(self):
        class Baz(Arrayish):
            constprops = {'colour': 'color'}
            color = None

        assert Baz(None, {'colour': 'blue'}).color == 'blue'

    def test_classid(self):
        obj = Arrayish(None, {'classid': 'thing'})

        assert obj.classid == 'thing'
        assert obj.get_classname() == 'thing'
        assert Arrayish().get_classname() == 'arrayish'

    def test_save_opts(self):
        class Saved(Arrayish):
            save_opts = True

        assert Saved({'a': 1}, {'x': 1}).data_opts == {'x': 1}
        assert Arrayish({'a': 1}, {'x': 1}).data_opts is None

    def test_hooks(self):
        obj = Hooked('a=1')

        assert obj.data == {'a': '1'}
        assert obj.calls == [('init', 0), ('prep', 'a=1'), ('post', 1)]

    def test_hooks_load(self):
        obj = Hooked({'a': 1})
        obj.load({'b': 2})
        assert obj.calls == [('init', 0), ('prep', {'a': 1}), ('post', 1)]

        obj.load('c=3', {'prep': True, 'post': True})
        assert obj.data == {'c': '3'}
        assert obj.calls[-2:] == [('prep', 'c=3'), ('post', 1)]

    def test_defaults(self):
        obj = Hooked()

        assert obj['name'] == 'default'
        assert obj.calls == [('init', 0), ('defaults',)]

        obj = Hooked(None, {'nodefaults': True})
        assert len(obj) == 0
        assert obj.calls == [('init', 0)]


class TestSpawn(unittest.TestCase):
    def test_spawn(self):
        class Baz(Arrayish):
            constprops = ('color',)
            color = None

        p = Arrayish()
        baz = Baz({'a': 1}, {'color': 'red', 'parent': p})
        child = baz.spawn()

        assert type(child) is Baz
        assert child.color == 'red'
        assert child.parent is p
        assert len(child) == 0
        assert baz.data == {'a': 1}

        child.set('b', 2)
        assert not baz.has('b')

    def test_spawn_registry(self):
        obj = CsvObject()
        obj.register_loader('tsv', lambda o, data, opts: data.split('\t'))

        child = obj.spawn()
        child.load('a\tb', {'type': 'tsv'})
        assert child.data == ['a', 'b']

        child.register_dumper('tsv', lambda o, opts: 'x')
        assert obj.formats.get_dumper('tsv') is None


class TestFormats(unittest.TestCase):
    def test_default_tags(self):
        formats = DataObject.formats

        assert formats.loader_tags() == ['array', 'dom_node', 'json',
                          'objectified', 'simple_xml', 'xml_string', 'yaml']
        assert formats.dumper_tags() == ['array', 'dom_document',
            'dom_element', 'json', 'objectified', 'simple_xml', 'xml', 'yaml']

    def test_subclass_tags(self):
        assert 'csv' in CsvObject.formats.loader_tags()
        assert 'csv' in CsvObject.formats.dumper_tags()
        assert not ('csv' in Arrayish.formats.loader_tags())

    def test_override_keeps_tag(self):
        class Upper(Arrayish):
            def to_array(self, opts=None):
                return dict([(k, v.upper()) for k, v in self])

        obj = Upper({'a': 'b'})

        assert obj.dump('array') == {'a': 'B'}
        assert obj.to_json() == '{"a":"B"}'

    def test_dump(self):
        obj = CsvObject({'a': 1, 'b': 2})

        assert obj.dump('csv') == '1,2'
        assert obj.dump('array') is obj.data
        self.assertRaises(UnhandledFormatError, obj.dump, 'tsv')

    def test_instance_loader(self):
        obj = Arrayish()
        obj.register_loader('csv', lambda o, data, opts: data.split(','))
        obj.load('a,b', {'type': 'csv'})

        assert obj.data == ['a', 'b']
        assert Arrayish.formats.get_loader('csv') is None
        self.assertRaises(UnhandledFormatError, Arrayish, 'a,b', type='csv')


class TestArrayish(unittest.TestCase):
    def test_access(self):
        obj = Arrayish({'a': 1})

        obj['b'] = None
        obj.append('c')

        assert obj['a'] == 1
        assert obj.get('x', 5) == 5
        assert 'b' in obj
        assert not obj.is_set('b')
        assert obj.key_exists('b')
        assert obj.array_keys() == ['a', 'b', 0]
        assert list(obj) == [('a', 1), ('b', None), (0, 'c')]

        del obj['a']
        assert not obj.has('a')
        assert len(obj) == 2

    def test_positional(self):
        obj = Arrayish(['b', 'd'])

        obj.insert('a')
        obj.insert('c', 2)
        obj.insert_all(['e', 'f'], 4)
        assert obj.data == ['a', 'b', 'c', 'd', 'e', 'f']

        assert obj.splice(1, 2) == ['b', 'c']
        obj.swap(0, 1)
        assert obj.data == ['d', 'a', 'e', 'f']

        self.assertRaises(KeyNotFoundError, obj.swap, 0, 10)

    def test_repr(self):
        assert repr(Arrayish({'a': 1})) == "Arrayish({'a': 1})"


class TestFault(unittest.TestCase):
    def test_fault(self):
        f = Fault('Client.Thing', 'Bad thing', detail=5)

        assert f.to_dict() == {'faultcode': 'Client.Thing',
                                    'faultstring': 'Bad thing', 'detail': 5}
        assert 'Client.Thing' in str(f)

        assert Fault().faultstring == 'Fault'
        assert 'detail' not in Fault().to_dict()

    def test_codes(self):
        assert PolyformError().faultcode == 'Server'
        assert LoadError().faultcode == 'Client.LoadFailure'
        assert MissingCapabilityError().faultcode == \
                                                    'Server.MissingCapability'
        assert KeyNotFoundError('a').faultcode == 'Client.KeyNotFound'

    def test_hierarchy(self):
        assert issubclass(MissingCapabilityError, NotImplementedError)
        assert issubclass(KeyNotFoundError, KeyError)

        for cls in (UnsupportedFormatError, UnhandledFormatError, LoadError,
                                    MissingCapabilityError, KeyNotFoundError):
            assert issubclass(cls, PolyformError)
            assert issubclass(cls, Fault)

    def test_registered(self):
        assert LoadError in Fault.REGISTERED['Client.LoadFailure']


if __name__ == '__main__':
    unittest.main()
