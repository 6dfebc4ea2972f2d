""" Construction of outgoing message envelopes: the header, and the checks
    applied to the parent header, metadata, and content before they are put
    on the wire.
"""

import collections.abc
import datetime
import uuid

from .. import config
from . import types
from .errors import ContentShapeError
from .message import Message
from .part import EMPTY, Part, encode_time


def new_id():
    """ Return a new, unique message id. """

    return str(uuid.uuid4())


def now():
    """ Return the current time in the header date format, with microsecond
        precision.
    """

    return encode_time(datetime.datetime.now(datetime.timezone.utc))


def build_header(session, msg_type, msg_id=None):
    """ Return a new header for a message of the given *msg_type*, which may
        be a :class:`types.MsgType` member or its wire name. A message id is
        generated if one is not provided.
    """

    msg_type = types.normalize(msg_type)

    if msg_id is None:
        msg_id = new_id()

    header = dict()
    header['msg_id'] = msg_id
    header['msg_type'] = msg_type
    header['version'] = config.protocol_version()
    header['username'] = session.username
    header['session'] = session.id
    header['date'] = now()

    return header


def _checked(name, value):
    """ Substitute :data:`part.EMPTY` for an absent part, and reject anything
        that is not a mapping.
    """

    if value is None:
        return EMPTY

    if isinstance(value, collections.abc.Mapping):
        return value

    raise ContentShapeError(name + ' must be a mapping, not ' + type(value).__name__)


def build(session, msg_type, content=None, parent_header=None, metadata=None,
          msg_id=None, buffers=()):
    """ Return a new outgoing :class:`message.Message`. The *parent_header*
        may be a received :class:`message.Message`, in which case its header
        bytes are carried over unchanged.
    """

    if isinstance(parent_header, Message):
        # Each message owns its parts; only the received bytes carry over.
        received = parent_header.header
        parent = Part(raw=received.raw, value=received.value)
    else:
        parent = Part(value=_checked('parent_header', parent_header))

    metadata = _checked('metadata', metadata)
    content = _checked('content', content)

    header = build_header(session, msg_type, msg_id)

    return Message(Part(value=header), parent,
                   Part(value=metadata), Part(value=content), buffers)


def assemble(session, msg_type, content=None, parent_header=None,
             metadata=None, msg_id=None):
    """ Build a message and return a tuple of its id and its four serialized
        parts: header, parent header, metadata, content.
    """

    message = build(session, msg_type, content, parent_header, metadata, msg_id)
    return message.msg_id, list(message)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
