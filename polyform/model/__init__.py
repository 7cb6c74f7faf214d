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

"""The ``polyform.model`` package contains the data object classes and the
base exception class."""

# Fault
from polyform.model.fault import Fault

# Data objects
from polyform.model._base import DataObjectMeta
from polyform.model._base import DataObjectBase
from polyform.model.dataobj import DataObject
from polyform.model.arrayish import Arrayish
from polyform.model.container import Container

# Identifier extractors
from polyform.model.ident import by_method
from polyform.model.ident import by_attribute
from polyform.model.ident import by_key
from polyform.model.ident import default_extractors
