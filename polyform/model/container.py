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

"""The ``polyform.model.container`` module contains :class:`Container`, a data
object that holds other objects.

Besides the ordered sequence of children in ``data``, a container keeps a
secondary index (``data_index``) that maps an identifier to each child. Keyed
access on a container (``container[key]``, ``get()``, ``set()``, ``has()``,
``delete()``) goes through this index, never through sequence positions.

The index and the sequence are updated in separate steps, containers must not
be mutated from several threads at once.
"""

import logging
logger = logging.getLogger(__name__)

from collections.abc import Mapping

from polyform.const import DEFAULT_ID_METHODS
from polyform.const import DEFAULT_ID_PROPS
from polyform.const import DEFAULT_ID_KEYS
from polyform.error import LoadError
from polyform.capability import Reducible
from polyform.capability import Validatable
from polyform.capability import InvalidDataHandler
from polyform.util import is_number
from polyform.util import loose_eq
from polyform.util import strict_eq
from polyform.util.record import OrderedRecord
from polyform.model.arrayish import Arrayish
from polyform.model.ident import is_identifier
from polyform.model.ident import default_extractors


LOAD_OPTIONS = ('type', 'clear', 'prep', 'post')
"""Options that control a single ``load()`` call and are not passed on to the
children."""

FINDABLE_TYPES = (Mapping, OrderedRecord, Arrayish)


class Container(Arrayish):
    """A data object holding a homogeneous sequence of children.

    When ``data_itemclass`` is set, every loaded item is passed to its
    constructor with ``parent`` set to the container. Items that implement
    :class:`polyform.capability.Validatable` and fail validation are skipped.

    The identifier of a child is found by trying, in order, the methods named
    in ``data_id_methods``, the attributes named in ``data_id_props`` and, for
    dict children, the keys named in ``data_id_keys``. Pass a list of
    functions as the ``id_extractors`` option to replace this strategy.
    """

    data_itemclass = None
    """The class children are wrapped in."""

    data_allow_null = False
    """Whether ``to_array()`` keeps None children by default."""

    data_id_methods = DEFAULT_ID_METHODS
    data_id_props = DEFAULT_ID_PROPS
    data_id_keys = DEFAULT_ID_KEYS

    id_extractors = None
    """A list of functions that return the identifier candidate of a child.
    Built from the ``data_id_*`` attributes when None."""

    strict_index = False
    """``set()`` writes the index even when no child with the given
    identifier is in the sequence, leaving an index entry that points outside
    the sequence. When True, such values are appended to the sequence
    instead."""

    constprops = ('id_extractors', 'strict_index')

    def __init__(self, data=None, opts=None, **kwargs):
        self.data_index = OrderedRecord()

        super(Container, self).__init__(data, opts, **kwargs)

    def clear(self, opts=None):
        self.data = OrderedRecord()
        self.data_index = OrderedRecord()

    def position_of(self, item):
        """Returns the position of the given child, compared by identity, or
        None."""

        for i, v in enumerate(self.data.values()):
            if v is item:
                return i

        return None

    def at_position(self, pos):
        return self.data.get(pos)

    def get_id_extractors(self):
        if self.id_extractors is None:
            self.id_extractors = default_extractors(self.data_id_methods,
                                         self.data_id_props, self.data_id_keys)

        return self.id_extractors

    def get_data_id(self, item):
        """Returns the identifier of the given child, or None."""

        for extract in self.get_id_extractors():
            retval = extract(item)
            if is_identifier(retval):
                return retval

        logger.debug("No data id was found for %r", item)

        return None

    def add_data_index(self, item, index_name=None):
        """Adds the given child to the index, under ``index_name`` when given
        or under its identifier otherwise. Returns False when no identifier
        could be found, the child is then only in the sequence."""

        if index_name is not None:
            self.data_index[index_name] = item
            return True

        data_id = self.get_data_id(item)
        if data_id is not None:
            self.data_index[data_id] = item
            return True

        logger.warning("add_data_index: no valid id could be determined "
                                                           "for %r", item)
        return False

    def get_data_index(self, key):
        """Returns the position of the child whose identifier is ``key``, or
        None. The identifier must have the same type as ``key``."""

        for i, item in enumerate(self.data.values()):
            data_id = self.get_data_id(item)
            if data_id is not None and strict_eq(data_id, key):
                return i

        return None

    def get_itemclass(self):
        if isinstance(self.data_itemclass, type):
            return self.data_itemclass

        return None

    def load_array(self, array, opts=None):
        """Appends the given items, wrapped in ``data_itemclass`` when it's
        set. Children that fail validation are passed to ``invalid_data()``
        when the container implements
        :class:`polyform.capability.InvalidDataHandler`, and are skipped."""

        child_opts = {}
        if opts is not None:
            child_opts = dict([(k, v) for k, v in opts.items()
                                                 if not (k in LOAD_OPTIONS)])
        child_opts['parent'] = self

        if isinstance(array, (Mapping, OrderedRecord)):
            array = array.values()

        elif array is None:
            return None

        elif not isinstance(array, (list, tuple)):
            raise LoadError("Container data must be a list or a mapping.",
                                                         type(array).__name__)

        cls = self.get_itemclass()
        items = []
        for item in array:
            if cls is not None:
                item = cls(item, dict(child_opts))

                if isinstance(item, Validatable) and not item.validate():
                    if isinstance(self, InvalidDataHandler):
                        self.invalid_data(item)
                    continue

            items.append(item)

        for item in items:
            self.append(item)

    def to_array(self, opts=None):
        """Returns the children as a list.

        :param opts: A dict that can contain:

            * ``unwrap``: Convert data object children with their own
              ``to_array()``. Defaults to True.
            * ``null``: Keep None children. Defaults to ``data_allow_null``.
        """

        if opts is None:
            opts = {}

        unwrap = opts.get('unwrap', True)

        allow_null = opts.get('null')
        if allow_null is None:
            allow_null = self.data_allow_null

        retval = []
        for val in self.data.values():
            if unwrap and isinstance(val, Reducible):
                val = val.to_array(opts)

            if val is not None or allow_null:
                retval.append(val)

        return retval

    def append(self, item, index_name=None):
        self.data.append(item)
        self.add_data_index(item, index_name)

    def insert(self, item, pos=0, index_name=None):
        self.data.insert(item, pos)
        self.add_data_index(item, index_name)

    def insert_all(self, items, pos=0):
        items = list(items)
        self.data.insert_all(items, pos)
        for item in items:
            self.add_data_index(item)

    def get(self, key, default=None):
        return self.data_index.get(key, default)

    def set(self, key, value):
        index = self.get_data_index(key)
        if index is not None:
            self.data[index] = value

        elif self.strict_index:
            self.data.append(value)

        self.data_index[key] = value

    def delete(self, key):
        index = self.get_data_index(key)
        if index is not None:
            self.data.splice(index, 1)

        self.data_index.delete(key)

    def key_exists(self, key):
        if not (isinstance(key, str) or is_number(key)):
            logger.error("Invalid offset: %r", key)
            return False

        return self.data_index.key_exists(key)

    def is_set(self, key):
        return self.data_index.is_set(key)

    def find(self, query, single=False, spawn=True):
        """Returns the children that match every key/value pair in ``query``.
        Values are compared loosely, so ``1`` matches ``'1'``. Only dict,
        record and :class:`Arrayish` children are considered.

        :param query: A dict of key to expected value.
        :param single: Return the first match, or None.
        :param spawn: Return the matches in a new empty container of the same
            class. Otherwise a list is returned.
        """

        if single:
            found = None
        elif spawn:
            found = self.spawn()
        else:
            found = []

        match_all = len(query) > 1
        if not match_all:
            key, val = None, None
            for key, val in query.items():
                break

        for item in self.data.values():
            if not isinstance(item, FINDABLE_TYPES):
                continue

            if match_all:
                matched = True
                for k, v in query.items():
                    value = item.get(k)
                    if value is None or not loose_eq(value, v):
                        matched = False
                        break

            else:
                matched = loose_eq(item.get(key), val)

            if matched:
                if single:
                    return item
                found.append(item)

        return found

    def new_item(self, data=None, opts=None):
        """Returns a new child built with ``data_itemclass``, or None when
        there is no item class."""

        opts = dict(opts or {})
        opts['parent'] = self

        cls = self.get_itemclass()
        if cls is not None:
            return cls(data, opts)

        return None

    def add_item(self, pos=None, data=None, opts=None):
        """Builds a new child with :meth:`new_item` and adds it at ``pos``.
        A ``pos`` of None or -1 appends the child."""

        child = self.new_item(data, opts)
        if child is not None:
            if pos is not None and pos != -1:
                self.insert(child, pos)
            else:
                self.append(child)

        return child
