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

"""The ``polyform.model.arrayish`` module contains :class:`Arrayish`, a data
object that can be used much like its underlying record."""

from polyform.model.dataobj import DataObject


class Arrayish(DataObject):
    """A data object that exposes the API of its
    :class:`polyform.util.record.OrderedRecord`.

    Indexing, ``in``, ``len()`` and iteration all work on the data. Iteration
    yields ``(key, value)`` pairs and must not be combined with structural
    changes.

    >>> foo = Arrayish({'id': 1})
    >>> foo['id']
    1
    >>> foo.set('hello', 'World')
    >>> foo.array_keys()
    ['id', 'hello']
    """

    def append(self, item):
        self.data.append(item)

    def splice(self, pos, length=None, *items):
        return self.data.splice(pos, length, *items)

    def insert(self, item, pos=0):
        self.data.insert(item, pos)

    def insert_all(self, items, pos=0):
        self.data.insert_all(items, pos)

    def swap(self, key1, key2):
        self.data.swap(key1, key2)

    def is_set(self, key):
        return self.data.is_set(key)

    def key_exists(self, key):
        return self.data.key_exists(key)

    def has(self, key):
        return self.key_exists(key)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data.set(key, value)

    def delete(self, key):
        self.data.delete(key)

    def array_keys(self):
        return self.data.array_keys()

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        self.delete(key)

    def __contains__(self, key):
        return self.key_exists(key)

    def __iter__(self):
        return iter(self.data)

    def __len__(self):
        return len(self.data)
