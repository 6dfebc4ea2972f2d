""" Encoding and decoding of the individual parts of a message envelope.

    Each of the four JSON parts (header, parent header, metadata, content)
    is represented by a :class:`Part`, which holds the serialized bytes, the
    decoded Python value, or both. Whichever form is missing is computed on
    first access and cached, so repeated reads of the same part are cheap.
"""

import collections.abc
import datetime
import enum
import logging
import re

from .. import json
from . import types


log = logging.getLogger(__name__)


class EmptyObject(collections.abc.Mapping):
    """ A read-only mapping with no items. The protocol requires the parent
        header, metadata, and content parts to be present on the wire even
        when they carry nothing; :data:`EMPTY` is the explicit marker for
        that case, distinct from None, and always serializes as ``{}``.
        It compares equal to any other empty mapping.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance


    def __getitem__(self, key):
        raise KeyError(key)


    def __iter__(self):
        return iter(())


    def __len__(self):
        return 0


    def __repr__(self):
        return 'EMPTY'


    def __hash__(self):
        return hash(EmptyObject)


# end of class EmptyObject


EMPTY = EmptyObject()


# The date format used in message headers. Microsecond precision is always
# emitted; the UTC offset is rendered without a colon.

_time_format = '%Y-%m-%dT%H:%M:%S.%f%z'

_time_pattern = re.compile(r'''
    ^(\d{4})-(\d{2})-(\d{2})
    T(\d{2}):(\d{2}):(\d{2})
    (?:\.(\d+))?
    (Z|[+-]\d{2}:?\d{2})?$
    ''', re.VERBOSE)


def encode_time(when):
    """ Render a :class:`datetime.datetime` in the header date format. Naive
        values are assumed to be UTC.
    """

    if when.tzinfo is None:
        when = when.replace(tzinfo=datetime.timezone.utc)

    return when.strftime(_time_format)


def decode_time(text):
    """ Parse a header date of the form ``YYYY-MM-DDTHH:MM:SS[.ffffff]+HHMM``
        and return a timezone-aware :class:`datetime.datetime`. Fractional
        seconds of any length are scaled to microseconds; a missing fraction
        means zero microseconds. A ``Z`` suffix or an offset with a colon
        is also accepted, and a missing offset is taken to mean UTC.
    """

    match = _time_pattern.match(text.strip())
    if match is None:
        raise ValueError('not a header timestamp: ' + repr(text))

    year, month, day, hour, minute, second, fraction, offset = match.groups()

    if fraction is None:
        microsecond = 0
    else:
        fraction = fraction[:6]
        microsecond = int(fraction) * 10 ** (6 - len(fraction))

    if offset is None or offset == 'Z':
        zone = datetime.timezone.utc
    else:
        sign = -1 if offset[0] == '-' else 1
        digits = offset[1:].replace(':', '')
        delta = datetime.timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
        zone = datetime.timezone(sign * delta)

    whole = datetime.datetime(int(year), int(month), int(day),
                              int(hour), int(minute), int(second), tzinfo=zone)

    return whole.replace(microsecond=microsecond)


def _canonical(value):
    """ Return *value* with every nested element reduced to a plain JSON
        type. The JSON backends disagree on how to render enums, datetimes,
        and non-dict mappings, if they render them at all; reducing them
        here keeps the serialized bytes, and therefore the signature, the
        same regardless of which backend is in use.
    """

    if isinstance(value, (str, int, float)) or value is None:
        # bool is an int subclass; IntEnum members are handled below.
        if not isinstance(value, enum.Enum):
            return value

    if isinstance(value, collections.abc.Mapping):
        # Covers EMPTY, and any other non-dict mapping.
        return dict((key, _canonical(item)) for key, item in value.items())

    if isinstance(value, types.MsgType):
        return types.tag_to_string(value)

    if isinstance(value, enum.Enum):
        return value.name

    if isinstance(value, datetime.datetime):
        return encode_time(value)

    if isinstance(value, (list, tuple, set, frozenset)):
        return [_canonical(item) for item in value]

    return value


_dumps = json.encoder()


def encode(value):
    """ Return the serialized bytes for a single message part. Strings are
        taken to be already serialized and are only UTF-8 encoded; bytes are
        returned unmodified. Anything else is serialized as JSON, with
        :class:`types.MsgType` members rendered as their wire name, other
        enum members as their bare name, and datetimes in the header date
        format.
    """

    if isinstance(value, bytes):
        return value

    if isinstance(value, str):
        return value.encode('utf-8')

    return _dumps(_canonical(value))


def decode(raw):
    """ Return the Python value for the serialized bytes of a message part.
        Content that is not valid JSON is returned as decoded text rather
        than raising an exception. In a decoded mapping, the 'date' field
        is converted to a :class:`datetime.datetime`, and the 'msg_type'
        field to a :class:`types.MsgType` member.
    """

    if isinstance(raw, str):
        text = raw
    else:
        raw = bytes(raw)
        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError:
            # Not UTF-8, and therefore not JSON either.
            text = raw.decode('utf-8', errors='replace')
            log.debug('message part is not UTF-8, keeping it as text: %.40r', raw)
            return text

    try:
        value = json.loads(text)
    except (json.DecodeError, ValueError):
        log.debug('message part is not JSON, keeping it as text: %.40r', text)
        return text

    if isinstance(value, dict):
        try:
            when = value['date']
        except KeyError:
            pass
        else:
            if isinstance(when, str):
                try:
                    value['date'] = decode_time(when)
                except ValueError:
                    log.debug('unparseable date left as text: %r', when)

        try:
            msg_type = value['msg_type']
        except KeyError:
            pass
        else:
            value['msg_type'] = types.normalize(msg_type)

    return value


# Marker for a projection of a Part that has not been computed yet. None
# cannot serve, since null is a legitimate decoded value.

_missing = object()


class Part:
    """ A single message part, holding either or both of its serialized
        bytes (*raw*) and its decoded Python value (*value*). At least one
        must be provided; the other is computed from it on first access and
        cached. The two forms are always equivalent.
    """

    __slots__ = ('_raw', '_value')

    def __init__(self, raw=_missing, value=_missing):

        if raw is _missing and value is _missing:
            raise ValueError('a Part requires raw bytes, a decoded value, or both')

        self._raw = raw
        self._value = value


    def __eq__(self, other):
        if isinstance(other, Part):
            return self.value == other.value
        return NotImplemented


    __hash__ = None


    def __repr__(self):
        return 'Part(' + self.state + ')'


    @property
    def raw(self):
        """ The serialized bytes for this part. """

        raw = self._raw
        if raw is _missing:
            raw = encode(self._value)
            self._raw = raw

        return raw


    @property
    def value(self):
        """ The decoded Python value for this part. """

        value = self._value
        if value is _missing:
            value = decode(self._raw)
            self._value = value

        return value


    @property
    def state(self):
        """ One of 'raw', 'decoded', or 'both', according to which forms
            of this part have been established so far.
        """

        if self._raw is _missing:
            return 'decoded'
        if self._value is _missing:
            return 'raw'
        return 'both'


# end of class Part


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
