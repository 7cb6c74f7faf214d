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

"""The ``polyform.protocol.yaml`` module contains the Yaml support of data
objects. It uses the PyYaml package, with its C extension when available.

Output is in block style with an explicit document start (``---``) and end
(``...``) marker, which also makes it detectable as Yaml when it's loaded back.
"""

import logging
logger = logging.getLogger(__name__)

import yaml

from yaml import YAMLError
try:
    from yaml import CSafeLoader as SafeLoader
    from yaml import CSafeDumper as SafeDumper

except ImportError:
    from yaml import SafeLoader
    from yaml import SafeDumper

from polyform.const import YAML_INDENT
from polyform.error import LoadError
from polyform.capability import Reducible
from polyform.decorator import loader
from polyform.decorator import dumper
from polyform.util.record import OrderedRecord


class YamlDumper(SafeDumper):
    """The safe dumper, extended to know about records and data objects."""


def _represent_record(dumper, record):
    return dumper.represent_data(record.to_native())


def _represent_reducible(dumper, obj):
    return dumper.represent_data(obj.to_array())


YamlDumper.add_representer(OrderedRecord, _represent_record)
YamlDumper.add_representer(tuple, YamlDumper.represent_list)
YamlDumper.add_multi_representer(Reducible, _represent_reducible)


DUMP_KWARGS = dict(
    Dumper=YamlDumper,
    default_flow_style=False,
    indent=YAML_INDENT,
    allow_unicode=True,
    sort_keys=False,
    explicit_start=True,
    explicit_end=True,
)


def yaml_encode(value, **kwargs):
    """Encodes the given value to a Yaml string. Keyword arguments override
    the defaults in ``DUMP_KWARGS``."""

    out_kwargs = dict(DUMP_KWARGS)
    out_kwargs.update(kwargs)

    return yaml.dump(value, **out_kwargs)


def yaml_decode(s):
    """Decodes the given Yaml string, raising :class:`LoadError` on invalid
    input."""

    try:
        return yaml.load(s, Loader=SafeLoader)

    except YAMLError as e:
        raise LoadError("Could not decode Yaml.", repr(e))


class YamlMixin(object):
    """Yaml input and output for data objects. Both directions go through the
    ``load_array()`` and ``to_array()`` methods of the class."""

    @loader('yaml')
    def load_yaml(self, yaml_string, opts=None):
        return self.load_array(yaml_decode(yaml_string), opts)

    @dumper('yaml')
    def to_yaml(self, opts=None):
        return yaml_encode(self.to_array(opts))
