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

"""The ``polyform.protocol.xml`` module contains the Xml support of data
objects, built on lxml.

Every Xml operation is defined in terms of two extension points that concrete
classes implement:

* ``load_simple_xml(element, opts)``, which loads an lxml element, and
* ``to_simple_xml(opts)``, which returns an lxml element.

Xml strings, ``xml.dom`` nodes and objectified elements are converted to lxml
elements on the way in, and produced from the result of ``to_simple_xml()`` on
the way out.
"""

import logging
logger = logging.getLogger(__name__)

from xml.dom import Node as DomNode
from xml.dom import minidom

from lxml import etree

from polyform.const import XML_DECLARATION
from polyform.error import LoadError
from polyform.error import PolyformError
from polyform.error import MissingCapabilityError
from polyform.decorator import loader
from polyform.decorator import dumper
from polyform.util import has_backend


OBJECTIFY_BACKEND = 'lxml.objectify'


def get_objectify():
    """Returns the ``lxml.objectify`` module, or None when it's not
    available."""

    if not has_backend(OBJECTIFY_BACKEND):
        return None

    from lxml import objectify
    return objectify


def is_element_tree(value):
    """True for lxml element trees, or anything else that has a ``getroot()``
    method returning an lxml element."""

    getroot = getattr(value, 'getroot', None)
    return callable(getroot) and etree.iselement(getroot())


def xml_parse(s, parser=None):
    """Parses the given Xml string into an lxml element, raising
    :class:`LoadError` on invalid input."""

    if isinstance(s, str):
        s = s.encode('utf8')

    try:
        return etree.fromstring(s, parser)

    except etree.XMLSyntaxError as e:
        raise LoadError("Could not parse Xml.", repr(e))


def _get_element(value, what):
    if etree.iselement(value):
        return value

    if isinstance(value, str):
        return xml_parse(value)

    raise PolyformError("Invalid %s XML passed." % what, detail=value)


class XmlBuildMixin(object):
    """Helpers for building the lxml elements that ``to_simple_xml()``
    implementations return."""

    def get_simple_xml_element(self, opts=None):
        """Returns an lxml element to populate from a data object.

        :param opts: A dict that can contain:

            * ``element``: The element (or Xml string) to use as is.
            * ``parent_element``: The element (or Xml string) under which a
              new child is created. The child tag is ``child_element``,
              ``default_tag`` or the class name, in that order.
            * ``default_element``: The element (or Xml string) to use when
              none of the above are given.
            * ``default_tag``: The tag of a new root element.

            When nothing is given, a new root element named after the class is
            returned.
        """

        if opts is None:
            opts = {}

        if opts.get('element') is not None:
            return _get_element(opts['element'], 'element')

        if opts.get('parent_element') is not None:
            parent = _get_element(opts['parent_element'], 'parent')

            tag = opts.get('child_element')
            if tag is None:
                tag = opts.get('default_tag')
            if tag is None:
                tag = self.get_classname()

            return etree.SubElement(parent, tag)

        if opts.get('default_element') is not None:
            return _get_element(opts['default_element'], 'default')

        if opts.get('default_tag') is not None:
            return etree.Element(opts['default_tag'])

        return etree.Element(self.get_classname())


class XmlInputMixin(object):
    """Loaders that convert their input to an lxml element and pass it to
    ``load_simple_xml()``."""

    @loader('xml_string')
    def load_xml_string(self, string, opts=None):
        return self.load_simple_xml(xml_parse(string), opts)

    @loader('dom_node')
    def load_dom_node(self, dom, opts=None):
        if is_element_tree(dom):
            return self.load_simple_xml(dom.getroot(), opts)

        if dom.nodeType == DomNode.DOCUMENT_NODE:
            dom = dom.documentElement

        return self.load_simple_xml(xml_parse(dom.toxml()), opts)

    @loader('objectified')
    def load_objectified(self, element, opts=None):
        # objectified elements are lxml elements too
        return self.load_simple_xml(element, opts)


class XmlOutputMixin(object):
    """Dumpers that call ``to_simple_xml()`` and convert its result."""

    @dumper('dom_element')
    def to_dom_element(self, opts=None):
        element = self.to_simple_xml(opts)
        return minidom.parseString(etree.tostring(element)).documentElement

    @dumper('dom_document')
    def to_dom_document(self, opts=None):
        return self.to_dom_element(opts).ownerDocument

    @dumper('objectified')
    def to_objectified(self, opts=None):
        """Returns an ``lxml.objectify`` element.

        :param opts: When ``opts['fatal']`` is false, a missing objectify
            backend is logged and None is returned instead of raising
            :class:`MissingCapabilityError`.
        """

        objectify = get_objectify()
        if objectify is None:
            fatal = True
            if opts is not None and 'fatal' in opts:
                fatal = bool(opts['fatal'])

            msg = "%s not found, but to_objectified() was called" % \
                                                              OBJECTIFY_BACKEND
            if fatal:
                raise MissingCapabilityError(msg)

            logger.error(msg)
            return None

        element = self.to_simple_xml(opts)
        return objectify.fromstring(etree.tostring(element))

    @dumper('xml')
    def to_xml(self, opts=None):
        """Returns an Xml string with a declaration line.

        :param opts: When ``opts['reformat']`` is true, the output is
            re-indented.
        """

        element = self.to_simple_xml(opts)
        xml_string = etree.tostring(element, encoding='unicode')

        if opts is not None and opts.get('reformat', False):
            parser = etree.XMLParser(remove_blank_text=True)
            element = xml_parse(xml_string, parser)
            xml_string = etree.tostring(element, encoding='unicode',
                                                          pretty_print=True)
            return '%s\n%s' % (XML_DECLARATION, xml_string)

        return '%s\n%s\n' % (XML_DECLARATION, xml_string)
