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

"""The ``polyform.model.dataobj`` module contains :class:`DataObject`, the base
class of every polyform data object.

The ``load()`` method figures out the format of the incoming data, either from
the ``type`` option or with ``detect_data_type()``, and calls the loader that
is registered for that format. Loaders are methods tagged with
:func:`polyform.decorator.loader`; the default ones handle native lists and
dicts, Json, Yaml and Xml.

The ``to_*()`` methods work the other way around. ``to_json()`` and
``to_yaml()`` both call ``to_array()``, so overriding ``to_array()`` (and
``load_array()``) is usually all a subclass has to do. The Xml methods all go
through ``to_simple_xml()`` and ``load_simple_xml()``, which don't have a
default implementation.

>>> class Foo(DataObject):
...     pass
...
>>> Foo('{"id": 1}').to_array()
OrderedRecord({'id': 1})
"""

import logging
logger = logging.getLogger(__name__)

from polyform.error import LoadError
from polyform.error import UnhandledFormatError
from polyform.error import UnsupportedFormatError
from polyform.error import MissingCapabilityError
from polyform.capability import PrepLoadable
from polyform.decorator import loader
from polyform.decorator import dumper
from polyform.model._base import DataObjectBase
from polyform.protocol.detect import DetectTypeMixin
from polyform.protocol.json import JsonMixin
from polyform.protocol.yaml import YamlMixin
from polyform.protocol.xml import XmlBuildMixin
from polyform.protocol.xml import XmlInputMixin
from polyform.protocol.xml import XmlOutputMixin


class DataObject(DataObjectBase, DetectTypeMixin, JsonMixin, YamlMixin,
                               XmlBuildMixin, XmlInputMixin, XmlOutputMixin):
    """Data object that can be loaded from and dumped to several formats."""

    def load_data(self, data, opts=None):
        if opts is None:
            opts = {}

        if opts.get('prep', False) and isinstance(self, PrepLoadable):
            data = self.data_prep(data, opts)

        tag = opts.get('type')
        if tag is None:
            tag = self.detect_data_type(data)

        if tag is None:
            raise UnsupportedFormatError(data)

        func = self.formats.get_loader(tag)
        if func is None:
            raise UnhandledFormatError(tag)

        logger.debug("Loading %r data with %s", tag, func.__name__)

        # False means failure, None or True means the loader set the data
        # itself, anything else is the new data.
        retval = func(self, data, opts)
        if retval is False:
            raise LoadError()

        return retval

    def dump(self, tag, opts=None):
        """Returns the data in the format with the given tag."""

        func = self.formats.get_dumper(tag)
        if func is None:
            raise UnhandledFormatError(tag)

        return func(self, opts)

    @loader('array')
    def load_array(self, array, opts=None):
        return array

    @dumper('array')
    def to_array(self, opts=None):
        return self.data

    @loader('simple_xml')
    def load_simple_xml(self, element, opts=None):
        raise MissingCapabilityError("No load_simple_xml() method defined.")

    @dumper('simple_xml')
    def to_simple_xml(self, opts=None):
        raise MissingCapabilityError("No to_simple_xml() method defined.")

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.data.to_native())
