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

"""The ``polyform.model._base`` module contains the construction and load
lifecycle that all data objects share."""

import logging
logger = logging.getLogger(__name__)

from copy import copy
from collections.abc import Mapping

from polyform.error import LoadError
from polyform.capability import Reducible
from polyform.capability import Initializable
from polyform.capability import PostLoadable
from polyform.capability import DefaultPopulatable
from polyform.protocol._base import FormatRegistry
from polyform.util.record import OrderedRecord


class DataObjectMeta(type):
    """Builds the format registry of every data object class from its tagged
    methods."""

    def __init__(self, cls_name, cls_bases, cls_dict):
        super(DataObjectMeta, self).__init__(cls_name, cls_bases, cls_dict)

        self.formats = FormatRegistry.from_class(self)


class DataObjectBase(Reducible, metaclass=DataObjectMeta):
    """The absolute minimum data object.

    A data object owns an :class:`OrderedRecord` in its ``data`` attribute and
    an optional, non-owning reference to a ``parent`` object.

    It's constructed either as ``Cls(data, opts)`` or, when the ``newconst``
    class attribute is True, as ``Cls(opts)`` where ``opts['data']`` holds the
    data. Keyword arguments are merged into ``opts``. The options that are
    understood by the constructor are:

    * ``parent``: The parent object.
    * ``type``: The format tag of the data, skips format detection.
    * ``nodefaults``: Don't call ``data_defaults()`` when there is no data.
    * ``classid`` and any name in ``constprops``: Copied to the attribute of
      the same name, when the class declares it.
    """

    newconst = False
    """When True, a dict passed as the only argument is taken as the options,
    with the data in its ``data`` entry."""

    constprops = ()
    """The attributes that are initialized from constructor options. Either a
    sequence of names or a dict of option name to attribute name."""

    save_opts = False
    """When True, constructor options are saved in ``data_opts``."""

    classid = None
    """The class identifier, used as the default Xml tag name."""

    def __init__(self, data=None, opts=None, **kwargs):
        self.parent = None
        self.data = OrderedRecord()
        self.data_opts = None

        if len(kwargs) > 0:
            opts = dict(opts or {})
            opts.update(kwargs)

        self._construct_data(data, opts)

    def _get_constprops(self):
        if isinstance(self.constprops, Mapping):
            props = list(self.constprops.items())
        else:
            props = [(p, p) for p in self.constprops]

        props.append(('classid', 'classid'))

        return props

    def _construct_data(self, mixed=None, opts=None):
        if opts is None:
            if isinstance(mixed, Mapping) and self.newconst:
                opts = mixed
                mixed = opts.get('data')
            else:
                opts = {}

        if opts.get('parent') is not None:
            self.parent = opts['parent']

        for popt, pname in self._get_constprops():
            if hasattr(self, pname) and opts.get(popt) is not None:
                setattr(self, pname, opts[popt])

        if isinstance(self, Initializable):
            # no data is available at this point
            self.data_init(opts)

        if self.save_opts:
            self.data_opts = opts

        if mixed is not None:
            loadopts = {'clear': False, 'prep': True, 'post': True}
            if opts.get('type') is not None:
                loadopts['type'] = opts['type']

            self.load(mixed, loadopts)

        elif isinstance(self, DefaultPopulatable):
            if not opts.get('nodefaults', False):
                self.data_defaults(opts)

    def load_data(self, data, opts=None):
        """Returns the loaded data, or None (or True) when the data was loaded
        in place."""

        raise NotImplementedError()

    def load(self, data, opts=None):
        """Loads the given data.

        :param opts: A dict that can contain:

            * ``clear``: Clear existing data first.
            * ``prep``: Pass the data through ``data_prep()`` first.
            * ``post``: Call ``data_post()`` after loading.
            * ``type``: The format tag of the data, skips detection.

        The data is only replaced once the loader succeeded.
        """

        if opts is None:
            opts = {}

        if opts.get('clear', False):
            self.clear()

        retval = self.load_data(data, opts)

        if retval is not None and retval is not True:
            self.data = self._to_record(retval)

        if opts.get('post', False) and isinstance(self, PostLoadable):
            self.data_post(opts)

    @staticmethod
    def _to_record(value):
        try:
            return OrderedRecord(value)

        except TypeError as e:
            raise LoadError("Loaded data is not a record.", repr(e))

    def clear(self, opts=None):
        self.data = OrderedRecord()

    def spawn(self, opts=None):
        """Returns an empty object of the same class, with the same fixed
        properties."""

        retval = copy(self)
        if 'formats' in vars(retval):
            retval.formats = retval.formats.copy()
        retval.clear()

        return retval

    def get_classname(self):
        if self.classid is not None:
            return self.classid

        return self.__class__.__name__.lower()

    def register_loader(self, tag, func):
        """Registers a loader for this instance only. It's called as
        ``func(obj, data, opts)``."""

        if not ('formats' in vars(self)):
            self.formats = self.formats.copy()
        self.formats.add_loader(tag, func)

    def register_dumper(self, tag, func):
        """Registers a dumper for this instance only. It's called as
        ``func(obj, opts)``."""

        if not ('formats' in vars(self)):
            self.formats = self.formats.copy()
        self.formats.add_dumper(tag, func)
