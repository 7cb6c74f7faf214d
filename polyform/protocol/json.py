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

"""The ``polyform.protocol.json`` module contains the Json support of data
objects.

Output is tuned with a set of flags. Each flag has an option name, and there are
a few presets that set several flags at once:

=================  ===============================  ===========================
Option             Flag(s)                          Effect
=================  ===============================  ===========================
``hex_tag``        ``JSON_HEX_TAG``                 ``<`` and ``>`` as \\u003C
                                                    and \\u003E
``hex_amp``        ``JSON_HEX_AMP``                 ``&`` as \\u0026
``hex_apos``       ``JSON_HEX_APOS``                ``'`` as \\u0027
``hex_quot``       ``JSON_HEX_QUOT``                ``"`` as \\u0022
``force_object``   ``JSON_FORCE_OBJECT``            lists as objects
``numeric``        ``JSON_NUMERIC_CHECK``           numeric strings as numbers
``pretty``         ``JSON_PRETTY_PRINT``            indented output
``slashes``        ``JSON_UNESCAPED_SLASHES``       ``/`` is not escaped
``unicode``        ``JSON_UNESCAPED_UNICODE``       non-ascii is not escaped
``partial``        ``JSON_PARTIAL_OUTPUT_ON_ERROR`` unencodable values as null
``float``          ``JSON_PRESERVE_ZERO_FRACTION``  ``3.0`` stays ``3.0``
``fancy``          pretty, slashes
``clean``          slashes, unicode
``numbers``        numeric, float
``xml``            all four hex flags
=================  ===============================  ===========================

Options are applied in the order they are given, so ``{'numbers': True,
'numeric': False}`` ends up with only ``JSON_PRESERVE_ZERO_FRACTION`` set.
"""

import re
import json
import math
import logging
logger = logging.getLogger(__name__)

from collections.abc import Mapping
from json import JSONDecodeError

from polyform.const import JSON_INDENT
from polyform.error import LoadError
from polyform.capability import Reducible
from polyform.decorator import loader
from polyform.decorator import dumper
from polyform.util import is_numeric
from polyform.util import to_number
from polyform.util import set_flag
from polyform.util.record import OrderedRecord


JSON_HEX_TAG = 1
JSON_HEX_AMP = 2
JSON_HEX_APOS = 4
JSON_HEX_QUOT = 8
JSON_FORCE_OBJECT = 16
JSON_NUMERIC_CHECK = 32
JSON_UNESCAPED_SLASHES = 64
JSON_PRETTY_PRINT = 128
JSON_UNESCAPED_UNICODE = 256
JSON_PARTIAL_OUTPUT_ON_ERROR = 512
JSON_PRESERVE_ZERO_FRACTION = 1024

JSON_OPTIONS = {
    'hex_tag': JSON_HEX_TAG,
    'hex_amp': JSON_HEX_AMP,
    'hex_apos': JSON_HEX_APOS,
    'hex_quot': JSON_HEX_QUOT,
    'force_object': JSON_FORCE_OBJECT,
    'numeric': JSON_NUMERIC_CHECK,
    'pretty': JSON_PRETTY_PRINT,
    'slashes': JSON_UNESCAPED_SLASHES,
    'unicode': JSON_UNESCAPED_UNICODE,
    'partial': JSON_PARTIAL_OUTPUT_ON_ERROR,
    'float': JSON_PRESERVE_ZERO_FRACTION,

    # presets
    'fancy': JSON_PRETTY_PRINT | JSON_UNESCAPED_SLASHES,
    'clean': JSON_UNESCAPED_SLASHES | JSON_UNESCAPED_UNICODE,
    'numbers': JSON_NUMERIC_CHECK | JSON_PRESERVE_ZERO_FRACTION,
    'xml': JSON_HEX_TAG | JSON_HEX_AMP | JSON_HEX_APOS | JSON_HEX_QUOT,
}

# floats at or above this magnitude keep their float form
MAX_EXACT_FLOAT = 1e15

RE_JSON_STRING = re.compile(r'"(?:[^"\\]|\\.)*"')
RE_JSON_SPECIAL = re.compile(r'\\.|[<>&\'/]')


class JsonEncoder(json.JSONEncoder):
    def __init__(self, partial=False, **kwargs):
        super(JsonEncoder, self).__init__(**kwargs)
        self.partial = partial

    def default(self, o):
        if isinstance(o, Reducible):
            return _prepare(o.to_array(), 0)

        if isinstance(o, OrderedRecord):
            return o.to_native()

        try:
            return super(JsonEncoder, self).default(o)

        except TypeError as e:
            if not self.partial:
                raise

            logger.debug("Substituting null for %r: %r", o, e)
            return None


def json_flags(opts):
    """Returns the flags described by the given options.

    :param opts: A dict of options, see the module docstring. A bool is taken
        as ``{'fancy': opts}``. The ``json_flags`` entry, when present, gives
        the initial flags.
    """

    if isinstance(opts, bool):
        opts = {'fancy': opts}

    if opts is None:
        return 0

    flags = opts.get('json_flags', 0)
    for name, value in opts.items():
        flag = JSON_OPTIONS.get(name)
        if flag is not None:
            flags = set_flag(flags, flag, value)

    return flags


def _prepare(value, flags):
    if isinstance(value, Reducible):
        value = value.to_array()

    if isinstance(value, OrderedRecord):
        if value.is_list() and not (flags & JSON_FORCE_OBJECT):
            return [_prepare(v, flags) for v in value.values()]
        return dict([(str(k), _prepare(v, flags)) for k, v in value.items()])

    if isinstance(value, Mapping):
        return dict([(k, _prepare(v, flags)) for k, v in value.items()])

    if isinstance(value, (list, tuple)):
        if flags & JSON_FORCE_OBJECT:
            return dict([(str(i), _prepare(v, flags))
                                                for i, v in enumerate(value)])
        return [_prepare(v, flags) for v in value]

    if isinstance(value, str):
        if not (flags & JSON_NUMERIC_CHECK and is_numeric(value)):
            return value
        value = to_number(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            if flags & JSON_PARTIAL_OUTPUT_ON_ERROR:
                return 0
            raise ValueError("Inf and NaN cannot be JSON encoded: %r" % value)

        if flags & JSON_PRESERVE_ZERO_FRACTION:
            return value

        if value.is_integer() and abs(value) < MAX_EXACT_FLOAT:
            return int(value)

    return value


def _escape(text, flags):
    table = {}
    if not (flags & JSON_UNESCAPED_SLASHES):
        table['/'] = '\\/'
    if flags & JSON_HEX_TAG:
        table['<'] = '\\u003C'
        table['>'] = '\\u003E'
    if flags & JSON_HEX_AMP:
        table['&'] = '\\u0026'
    if flags & JSON_HEX_APOS:
        table["'"] = '\\u0027'
    if flags & JSON_HEX_QUOT:
        table['\\"'] = '\\u0022'

    if len(table) == 0:
        return text

    def _sub_char(m):
        s = m.group(0)
        return table.get(s, s)

    def _sub_string(m):
        return RE_JSON_SPECIAL.sub(_sub_char, m.group(0))

    return RE_JSON_STRING.sub(_sub_string, text)


def json_encode(value, flags=0):
    """Encodes the given value to a Json string according to ``flags``."""

    partial = bool(flags & JSON_PARTIAL_OUTPUT_ON_ERROR)

    kwargs = dict(
        cls=JsonEncoder,
        partial=partial,
        ensure_ascii=not (flags & JSON_UNESCAPED_UNICODE),
        allow_nan=False,
        separators=(',', ':'),
    )

    if flags & JSON_PRETTY_PRINT:
        kwargs['indent'] = JSON_INDENT
        kwargs['separators'] = (',', ': ')

    retval = json.dumps(_prepare(value, flags), **kwargs)

    return _escape(retval, flags)


def json_decode(s):
    """Decodes the given Json string, raising :class:`LoadError` on invalid
    input."""

    try:
        return json.loads(s)

    except JSONDecodeError as e:
        raise LoadError("Could not decode Json.", repr(e))


class JsonMixin(object):
    """Json input and output for data objects. Both directions go through the
    ``load_array()`` and ``to_array()`` methods of the class."""

    @loader('json')
    def load_json(self, json_string, opts=None):
        return self.load_array(json_decode(json_string), opts)

    @dumper('json')
    def to_json(self, opts=None):
        """Returns the data as a Json string.

        :param opts: Encoding options, see :mod:`polyform.protocol.json`.
            ``True`` is the same as ``{'fancy': True}``. The options are also
            passed to ``to_array()``.
        """

        if isinstance(opts, bool):
            opts = {'fancy': opts}

        if opts is None:
            opts = {}

        return json_encode(self.to_array(opts), json_flags(opts))
