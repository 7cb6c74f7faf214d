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

"""The ``polyform.capability`` module contains the optional interfaces a data
object class can opt into. The core checks for them with ``isinstance`` and
only calls the hooks of the interfaces a class actually implements.
"""


class Reducible(object):
    """Can be reduced to native lists and dicts."""

    def to_array(self, opts=None):
        raise NotImplementedError()


class Initializable(object):
    """Gets a chance to set things up before any data is loaded. The data is
    not available yet when ``data_init`` runs."""

    def data_init(self, opts):
        raise NotImplementedError()


class PrepLoadable(object):
    """Transforms raw incoming data before its format is detected. Only called
    when the ``prep`` load option is set."""

    def data_prep(self, data, opts):
        raise NotImplementedError()


class PostLoadable(object):
    """Normalizes the data after it was loaded. Only called when the ``post``
    load option is set."""

    def data_post(self, opts):
        raise NotImplementedError()


class DefaultPopulatable(object):
    """Fills in default values when an object is built without data."""

    def data_defaults(self, opts):
        raise NotImplementedError()


class Validatable(object):
    """Containers skip children whose ``validate()`` returns a falsy value."""

    def validate(self):
        raise NotImplementedError()


class InvalidDataHandler(object):
    """Containers call ``invalid_data()`` with every child that failed
    validation."""

    def invalid_data(self, item):
        raise NotImplementedError()


class Identifiable(object):
    """Knows its own identifier inside a container."""

    def data_identifier(self):
        raise NotImplementedError()
