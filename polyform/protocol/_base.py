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

"""The ``polyform.protocol._base`` module contains the format registry that
maps format tags to the loader and dumper functions of a data object class."""

import logging
logger = logging.getLogger(__name__)

from polyform.decorator import get_loader_tags
from polyform.decorator import get_dumper_tags


class FormatRegistry(object):
    """Maps format tags like ``'json'`` or ``'xml_string'`` to loader and dumper
    functions. Loaders are called as ``f(obj, data, opts)``, dumpers as
    ``f(obj, opts)``.

    :param loaders: A dict of format tag to loader function.
    :param dumpers: A dict of format tag to dumper function.
    """

    def __init__(self, loaders=None, dumpers=None):
        self.loaders = dict(loaders or {})
        self.dumpers = dict(dumpers or {})

    @classmethod
    def from_class(cls, target):
        """Builds the registry of the given class from the methods tagged with
        ``@loader`` and ``@dumper`` anywhere in its mro. When a subclass
        overrides a tagged method without tagging it again, the tag points to
        the override."""

        loader_names = {}
        dumper_names = {}

        for base in reversed(target.__mro__):
            for name, member in vars(base).items():
                for tag in get_loader_tags(member):
                    loader_names[tag] = name
                for tag in get_dumper_tags(member):
                    dumper_names[tag] = name

        loaders = dict([(tag, getattr(target, name))
                                         for tag, name in loader_names.items()])
        dumpers = dict([(tag, getattr(target, name))
                                         for tag, name in dumper_names.items()])

        logger.debug("%s loads %r and dumps %r", target.__name__,
                                          sorted(loaders), sorted(dumpers))

        return cls(loaders, dumpers)

    def copy(self):
        return self.__class__(self.loaders, self.dumpers)

    def add_loader(self, tag, func):
        self.loaders[tag] = func

    def add_dumper(self, tag, func):
        self.dumpers[tag] = func

    def get_loader(self, tag):
        return self.loaders.get(tag)

    def get_dumper(self, tag):
        return self.dumpers.get(tag)

    def loader_tags(self):
        return sorted(self.loaders)

    def dumper_tags(self):
        return sorted(self.dumpers)

    def __repr__(self):
        return "%s(loaders=%r, dumpers=%r)" % (self.__class__.__name__,
                                      self.loader_tags(), self.dumper_tags())
