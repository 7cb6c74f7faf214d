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

__version__ = '1.0.0'

# the model package needs to be imported before anything that raises errors.
from polyform.model import *

from polyform.error import PolyformError
from polyform.error import UnsupportedFormatError
from polyform.error import UnhandledFormatError
from polyform.error import LoadError
from polyform.error import MissingCapabilityError
from polyform.error import KeyNotFoundError

from polyform.decorator import loader
from polyform.decorator import dumper

from polyform.capability import Reducible
from polyform.capability import Initializable
from polyform.capability import PrepLoadable
from polyform.capability import PostLoadable
from polyform.capability import DefaultPopulatable
from polyform.capability import Validatable
from polyform.capability import InvalidDataHandler
from polyform.capability import Identifiable

from polyform.util.record import OrderedRecord
from polyform.protocol import FormatRegistry
