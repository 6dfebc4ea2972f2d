""" Multipart framing for kernel messages.

    A frame, as sent or received on a socket, is laid out as:

        (identity...), <IDS|MSG>, signature, header, parent_header,
        metadata, content, (buffer...)

    The identities are routing prefixes added by the transport; they are
    unrelated to the message itself. The signature covers the four JSON parts
    that follow it, and nothing else.
"""

import logging

from . import envelope
from . import sign
from .errors import FramingError, MalformedMessageError
from .message import Message
from .part import Part


log = logging.getLogger(__name__)

DELIMITER = b'<IDS|MSG>'


def _as_bytes(part):

    if isinstance(part, str):
        return part.encode('utf-8')

    # zmq.Frame instances expose their contents via the buffer protocol.
    return bytes(part)


def serialize(session, message, identities=()):
    """ Return the list of frames for an already constructed
        :class:`message.Message`. Buffers are appended verbatim.
    """

    parts = list(message)
    signature = sign.sign(session, parts)

    frames = [_as_bytes(identity) for identity in identities]
    frames.append(DELIMITER)
    frames.append(signature.encode('ascii'))
    frames.extend(parts)
    frames.extend(message.buffers)

    return frames


def to_frames(session, msg_type, content=None, parent_header=None,
              metadata=None, msg_id=None, identities=(), buffers=()):
    """ Build, sign, and frame a new message. Returns a tuple of the message
        id and the list of frames ready for a multipart send.
    """

    message = envelope.build(session, msg_type, content, parent_header,
                             metadata, msg_id, buffers)

    frames = serialize(session, message, identities)
    log.debug('framed %s %s', message.msg_type, message.msg_id)

    return message.msg_id, frames


def split_identities(parts):
    """ Separate the routing identities from the remainder of a received
        frame. Returns a tuple of the identities, in their original order,
        and everything following the delimiter.
    """

    identities = list()

    for index, part in enumerate(parts):
        part = _as_bytes(part)

        if part == DELIMITER:
            rest = [_as_bytes(remaining) for remaining in parts[index + 1:]]
            return identities, rest

        identities.append(part)

    raise FramingError('delimiter not found')


def from_frames(session, parts):
    """ Reconstruct a :class:`message.Message` from a received frame, after
        verifying its signature. Returns a tuple of the routing identities
        and the message.

        The header and parent header are decoded immediately, since nearly
        every message handler needs them; the metadata and content are only
        decoded on first access.
    """

    identities, rest = split_identities(list(parts))

    if len(rest) < 5:
        raise MalformedMessageError('expected at least 5 parts after the delimiter, received ' + str(len(rest)))

    signature = rest[0].decode('ascii', errors='replace')
    signed = rest[1:5]

    sign.verify(session, signature, signed)

    header = Part(raw=signed[0])
    if not isinstance(header.value, dict):
        raise MalformedMessageError('message header is not a JSON object')

    parent_header = Part(raw=signed[1])
    parent_header.value     # Populate the cache now.

    metadata = Part(raw=signed[2])
    content = Part(raw=signed[3])

    message = Message(header, parent_header, metadata, content, rest[5:])
    log.debug('received %s %s', message.msg_type, message.msg_id)

    return identities, message


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
