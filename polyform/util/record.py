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

"""
This module contains the ordered record implementation that backs every data
object.

An :class:`OrderedRecord` is a hybrid between a list and a dict: entries keep
their insertion order, positional entries have integer keys and named entries
have string keys. Positional operations (``insert``, ``splice``) count every
entry but only renumber the integer keys, named entries keep their names.

Iterating over a record yields ``(key, value)`` pairs. Changing the structure of
a record while iterating over it is undefined, callers must not do it.
"""

import re

from collections.abc import Mapping

from polyform.error import KeyNotFoundError


RE_INT_KEY = re.compile('0|-?[1-9][0-9]*')


def normalize_key(key):
    """Returns the canonical form of the given key. Integer-looking strings
    become ints, floats are truncated, bools become 0 or 1 and None becomes the
    empty string."""

    if isinstance(key, bool):
        return int(key)

    if isinstance(key, int):
        return key

    if isinstance(key, float):
        return int(key)

    if key is None:
        return ''

    if isinstance(key, str):
        if RE_INT_KEY.fullmatch(key) is not None:
            return int(key)
        return key

    raise TypeError("Illegal record key type: %r" % (key,))


class OrderedRecord(object):
    """Ordered, key-addressable sequence of values."""

    def __init__(self, data=None):
        self.__data = {}
        self.__next = 0

        if data is None:
            return

        if isinstance(data, OrderedRecord):
            self.__data = dict(data.__data)
            self.__next = data.__next

        elif isinstance(data, Mapping):
            for k, v in data.items():
                self[k] = v

        elif isinstance(data, (str, bytes)):
            raise TypeError("Can't build a record from %r" % (data,))

        else:
            for v in data:
                self.append(v)

    def __rebuild(self, entries):
        self.__data = {}
        self.__next = 0

        for k, v in entries:
            if isinstance(k, str):
                self.__data[k] = v
            else:
                self.append(v)

    def append(self, item):
        self.__data[self.__next] = item
        self.__next += 1

    def splice(self, pos, length=None, *items):
        """Removes ``length`` entries starting at ``pos`` and puts ``items`` in
        their place. Returns the removed values as a list.

        :param pos: Starting position. Negative values count from the end.
        :param length: Number of entries to remove. ``None`` means everything
            up to the end, negative values stop that many entries before the
            end.
        """

        entries = list(self.__data.items())
        count = len(entries)

        if pos < 0:
            pos = max(count + pos, 0)
        elif pos > count:
            pos = count

        if length is None:
            length = count - pos
        elif length < 0:
            length = max(count + length - pos, 0)

        removed = entries[pos:pos + length]
        self.__rebuild(entries[:pos] + [(None, i) for i in items]
                                                     + entries[pos + length:])

        return [v for _, v in removed]

    def insert(self, item, pos=0):
        if pos:
            self.splice(pos, 0, item)
        else:
            self.__rebuild([(None, item)] + list(self.__data.items()))

    def insert_all(self, items, pos=0):
        items = list(items)
        if pos:
            self.splice(pos, 0, *items)
        else:
            self.__rebuild([(None, i) for i in items]
                                                  + list(self.__data.items()))

    def swap(self, key1, key2):
        key1 = normalize_key(key1)
        key2 = normalize_key(key2)

        for k in (key1, key2):
            if not (k in self.__data):
                raise KeyNotFoundError(k)

        self.__data[key1], self.__data[key2] = \
                                           self.__data[key2], self.__data[key1]

    def is_set(self, key):
        """True when the key exists and its value is not None."""

        return self.__data.get(normalize_key(key)) is not None

    def key_exists(self, key):
        """True when the key exists, even when its value is None."""

        return normalize_key(key) in self.__data

    has = key_exists

    def get(self, key, default=None):
        return self.__data.get(normalize_key(key), default)

    def set(self, key, value):
        key = normalize_key(key)
        self.__data[key] = value
        if isinstance(key, int) and key >= self.__next:
            self.__next = key + 1

    def delete(self, key):
        self.__data.pop(normalize_key(key), None)

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        self.delete(key)

    def __contains__(self, key):
        return self.key_exists(key)

    def __iter__(self):
        return iter(self.__data.items())

    def __len__(self):
        return len(self.__data)

    def __eq__(self, other):
        if isinstance(other, OrderedRecord):
            return self.__data == other.__data

        if isinstance(other, Mapping):
            try:
                return self == OrderedRecord(other)
            except TypeError:
                return False

        if isinstance(other, (list, tuple)):
            return self.is_list() and list(self.__data.values()) == list(other)

        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return "OrderedRecord(%r)" % (self.to_native(),)

    def array_keys(self):
        return list(self.__data.keys())

    keys = array_keys

    def values(self):
        return list(self.__data.values())

    def items(self):
        return list(self.__data.items())

    def clear(self):
        self.__data = {}
        self.__next = 0

    def copy(self):
        return OrderedRecord(self)

    def is_list(self):
        for i, k in enumerate(self.__data):
            if k != i:
                return False
        return True

    def to_native(self):
        """Returns a plain ``list`` when the keys are ``0..n-1`` in order, a
        plain ``dict`` otherwise. Nested records are converted as well."""

        if self.is_list():
            return [_native(v) for v in self.__data.values()]

        return dict((k, _native(v)) for k, v in self.__data.items())


def _native(value):
    if isinstance(value, OrderedRecord):
        return value.to_native()
    return value
