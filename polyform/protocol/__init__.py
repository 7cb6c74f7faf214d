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

"""The ``polyform.protocol`` package contains the format support of data
objects: the format registry, format detection and the Json, Yaml and Xml
mixins."""

from polyform.protocol._base import FormatRegistry
from polyform.protocol.detect import DetectTypeMixin
from polyform.protocol.json import JsonMixin
from polyform.protocol.yaml import YamlMixin
from polyform.protocol.xml import XmlBuildMixin
from polyform.protocol.xml import XmlInputMixin
from polyform.protocol.xml import XmlOutputMixin
