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

"""The ``polyform.protocol.detect`` module contains the format detection
mixin of data objects.

Detection is deliberately simple. Subclasses extend it by overriding
``detect_data_type()`` or ``detect_string_type()`` and falling back to the
``super()`` version for the formats they don't know about.
"""

from xml.dom import Node as DomNode

from lxml import etree

from polyform.util import has_backend
from polyform.util.record import OrderedRecord
from polyform.protocol.xml import get_objectify
from polyform.protocol.xml import is_element_tree


ARRAY_TYPES = (dict, list, tuple, OrderedRecord)

BSON_BACKEND = 'bson'


def _is_bson_document(data):
    if not has_backend(BSON_BACKEND):
        return False

    from bson.raw_bson import RawBSONDocument
    return isinstance(data, RawBSONDocument)


class DetectTypeMixin(object):
    def detect_data_type(self, data):
        """Returns the format tag of the given data, or None when the format
        could not be detected.

        ======================================  ==================
        Data                                    Tag
        ======================================  ==================
        dict, list, tuple, OrderedRecord        ``'array'``
        str, bytes                              see detect_string_type()
        lxml.objectify element                  ``'objectified'``
        lxml element                            ``'simple_xml'``
        lxml element tree, xml.dom node         ``'dom_node'``
        bson.raw_bson.RawBSONDocument           ``'bson_document'``
        ======================================  ==================
        """

        if isinstance(data, ARRAY_TYPES):
            return 'array'

        if isinstance(data, bytes):
            fc = data.lstrip()[:1].decode('latin1')
            return self.detect_string_type(fc)

        if isinstance(data, str):
            return self.detect_string_type(data)

        objectify = get_objectify()
        if objectify is not None and \
                                 isinstance(data, objectify.ObjectifiedElement):
            return 'objectified'

        if etree.iselement(data):
            return 'simple_xml'

        if is_element_tree(data) or isinstance(data, DomNode):
            return 'dom_node'

        if _is_bson_document(data):
            return 'bson_document'

        return None

    def detect_string_type(self, string):
        """Returns the format tag of the given string based on its first
        non-whitespace character, or None.

        =============  ================
        Character      Tag
        =============  ================
        ``<``          ``'xml_string'``
        ``{`` ``[``    ``'json'``
        ``%`` ``-``    ``'yaml'``
        ``#``          ``'yaml'``
        =============  ================
        """

        fc = string.strip()[:1]

        if fc == '<':
            return 'xml_string'

        if fc in ('[', '{'):
            return 'json'

        if fc in ('%', '-', '#'):
            return 'yaml'

        return None
