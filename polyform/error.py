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


"""The ``polyform.error`` module contains the exceptions that data objects
raise. All of them propagate to the immediate caller, none are retried.
"""

from polyform.model.fault import Fault


class PolyformError(Fault):
    """Base class for all polyform errors."""

    CODE = 'Server'

    def __init__(self, faultstring="", detail=None):
        super(PolyformError, self).__init__(self.CODE, faultstring, detail)


class UnsupportedFormatError(PolyformError):
    """Raised when no format could be detected for the incoming data and none
    was given."""

    CODE = 'Client.UnsupportedFormat'

    def __init__(self, data=None, faultstring="Unsupported data type."):
        super(UnsupportedFormatError, self).__init__(faultstring,
                                                   detail=type(data).__name__)


class UnhandledFormatError(PolyformError):
    """Raised when a format tag has no loader or dumper registered."""

    CODE = 'Server.UnhandledFormat'

    def __init__(self, tag, faultstring="Could not handle data type %r."):
        try:
            faultstring = faultstring % (tag,)
        except TypeError:
            pass

        super(UnhandledFormatError, self).__init__(faultstring, detail=tag)
        self.tag = tag


class LoadError(PolyformError):
    """Raised when a loader signals that it could not load the data."""

    CODE = 'Client.LoadFailure'

    def __init__(self, faultstring="Could not load data.", detail=None):
        super(LoadError, self).__init__(faultstring, detail)


class MissingCapabilityError(PolyformError, NotImplementedError):
    """Raised when an extension point was not implemented or an optional
    backend library is not available."""

    CODE = 'Server.MissingCapability'

    def __init__(self, faultstring="Capability not available.", detail=None):
        super(MissingCapabilityError, self).__init__(faultstring, detail)


class KeyNotFoundError(PolyformError, KeyError):
    """Raised when an operation needs a key that does not exist."""

    CODE = 'Client.KeyNotFound'

    def __init__(self, key, faultstring="Key %r not found."):
        try:
            faultstring = faultstring % (key,)
        except TypeError:
            pass

        super(KeyNotFoundError, self).__init__(faultstring, detail=key)
        self.key = key
