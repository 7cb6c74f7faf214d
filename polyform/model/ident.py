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

"""The ``polyform.model.ident`` module contains the identifier extractors that
containers use to find the identifier of a child.

An extractor is a function that takes a child and returns a candidate
identifier, or None. The container tries its extractors in order and takes the
first candidate that is a string or a number.
"""

from collections.abc import Mapping

from polyform.util import is_number
from polyform.util.record import OrderedRecord
from polyform.model.arrayish import Arrayish


ARRAY_TYPES = (Mapping, OrderedRecord, list, tuple)
SCALAR_TYPES = (str, bytes, int, float, bool)


def is_identifier(value):
    return isinstance(value, str) or is_number(value)


def is_object(item):
    """True for anything that is neither a scalar nor a native collection."""

    return item is not None and not isinstance(item, ARRAY_TYPES + SCALAR_TYPES)


def by_method(name):
    """Calls the method ``name`` of object children."""

    def extract(item):
        if not is_object(item):
            return None

        method = getattr(item, name, None)
        if callable(method):
            return method()

        return None

    extract.__name__ = 'by_method_%s' % name
    return extract


def by_attribute(name):
    """Reads the attribute ``name`` of object children. For :class:`Arrayish`
    children, a missing attribute falls back to the data entry of the same
    name."""

    def extract(item):
        if not is_object(item):
            return None

        retval = getattr(item, name, None)
        if retval is None and isinstance(item, Arrayish):
            retval = item.get(name)

        return retval

    extract.__name__ = 'by_attribute_%s' % name
    return extract


def by_key(name):
    """Reads the entry ``name`` of dict and record children."""

    def extract(item):
        if isinstance(item, (Mapping, OrderedRecord)):
            return item.get(name)

        return None

    extract.__name__ = 'by_key_%s' % name
    return extract


def default_extractors(methods, props, keys):
    """Returns the extractors for the given method, attribute and key names,
    in that order."""

    return [by_method(n) for n in methods] \
         + [by_attribute(n) for n in props] \
         + [by_key(n) for n in keys]
