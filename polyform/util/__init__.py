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

import re
import logging
logger = logging.getLogger(__name__)

from importlib.util import find_spec


RE_NUMERIC = re.compile(
    r'[ \t\n\r\v\f]*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'[ \t\n\r\v\f]*')

RE_INTEGER = re.compile(r'\s*[+-]?[0-9]+\s*')

NUMBER_TYPES = (int, float)


def set_flag(flags, flag, value):
    """Returns ``flags`` with the bits in ``flag`` set when ``value`` is truthy
    and cleared otherwise."""

    if value:
        return flags | flag
    return flags & ~flag


def is_number(value):
    return isinstance(value, NUMBER_TYPES) and not isinstance(value, bool)


def is_numeric(value):
    """True for numbers and for strings that hold a decimal number."""

    if is_number(value):
        return True

    if isinstance(value, str):
        return RE_NUMERIC.fullmatch(value) is not None

    return False


def to_number(s):
    """Converts a numeric string to an int when it has no fraction or exponent
    part, to a float otherwise."""

    if RE_INTEGER.fullmatch(s) is not None:
        return int(s)
    return float(s)


def strict_eq(a, b):
    """Equality that also requires both values to be of the same type."""

    return type(a) is type(b) and a == b


def loose_eq(a, b):
    """Equality with the usual dynamic-language coercions: numbers equal their
    numeric string forms, two numeric strings compare as numbers, None equals every falsy value except non-empty
    strings and bools compare by truthiness."""

    if isinstance(a, bool) or isinstance(b, bool):
        return bool(a) == bool(b)

    if a is None or b is None:
        other = b if a is None else a
        if isinstance(other, str):
            return other == ''
        return not other

    if isinstance(a, str) and isinstance(b, str):
        if is_numeric(a) and is_numeric(b):
            return to_number(a) == to_number(b)
        return a == b

    if is_number(a) and isinstance(b, str):
        a, b = b, a

    if isinstance(a, str) and is_number(b):
        if is_numeric(a):
            return to_number(a) == b
        return a == str(b)

    return a == b


def has_backend(name):
    """Returns whether the optional module ``name`` can be imported."""

    try:
        return find_spec(name) is not None

    except (ImportError, ValueError) as e:
        logger.debug("Probing for %r failed: %r", name, e)
        return False
