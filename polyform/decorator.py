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

"""The ``polyform.decorator`` module contains the ``@loader`` and ``@dumper``
decorators. They tag data object methods with the name of the format they
handle. The tags are collected into a :class:`polyform.protocol.FormatRegistry`
when the class is created.

>>> class Foo(DataObject):
...     @loader('csv')
...     def load_csv(self, data, opts=None):
...         return data.split(',')
"""

LOADER_ATTR = '_polyform_loads'
DUMPER_ATTR = '_polyform_dumps'


def _tag(attr, tags):
    def wrapper(f):
        setattr(f, attr, tuple(getattr(f, attr, ())) + tuple(tags))
        return f
    return wrapper


def loader(*tags):
    """Marks the decorated method as the loader for the given format tags. The
    method is called as ``f(self, data, opts)``."""

    return _tag(LOADER_ATTR, tags)


def dumper(*tags):
    """Marks the decorated method as the dumper for the given format tags. The
    method is called as ``f(self, opts)``."""

    return _tag(DUMPER_ATTR, tags)


def get_loader_tags(f):
    return getattr(f, LOADER_ATTR, ())


def get_dumper_tags(f):
    return getattr(f, DUMPER_ATTR, ())
