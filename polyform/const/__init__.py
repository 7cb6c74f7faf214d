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

"""The ``polyform.const`` package contains miscellanous constant values needed
in various parts of polyform."""


DEFAULT_ID_METHODS = ('data_identifier',)
"""Names of the methods :class:`polyform.model.container.Container` calls on
its children to find their identifiers."""

DEFAULT_ID_PROPS = ('id', '_id')
"""Names of the attributes :class:`polyform.model.container.Container` reads
from its children to find their identifiers."""

DEFAULT_ID_KEYS = ('id', '_id')
"""Names of the keys :class:`polyform.model.container.Container` reads from
mapping children to find their identifiers."""

JSON_INDENT = 4
"""Indentation of pretty-printed JSON output."""

YAML_INDENT = 4
"""Indentation of YAML output."""

XML_DECLARATION = '<?xml version="1.0"?>'
"""Declaration line prepended to the output of ``to_xml()``."""

WARN_ON_DUPLICATE_FAULTCODE = True
"""Warn about duplicate faultcodes in all Fault subclasses globally. Only works
when CODE class attribute is set for every Fault subclass."""
