"""
kernelwire Protocol Layer
=========================

This package implements the kernel messaging protocol: the construction of
message envelopes, their serialization and signing, and the reconstruction
of received frames into lazily decoded messages.

The protocol layer MUST NOT depend on any transport implementation.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Request Builders (request.py)
    Validated content for each outgoing request type

    │
    ▼
Envelope Builder (envelope.py)
    Header construction, part shape checks

    │
    ▼
Framing (framing.py)
    Message <-> multipart frames
    - identity prefix and <IDS|MSG> delimiter
    - signature (sign.py)

    │
    ▼
Message Model (message.py, part.py, types.py)
    Lazy parts, accessors, the message type registry

---------------------------------------------------------------------
"""

from . import errors
from . import types
from . import part
from . import session
from . import sign
from . import message
from . import envelope
from . import framing
from . import request
from . import accessors

from .errors import (
    ProtocolError,
    FramingError,
    MalformedMessageError,
    UnsignedMessageError,
    InvalidSignatureError,
    InvalidMessageTypeError,
    ContentShapeError,
)
from .types import MsgType
from .part import EMPTY, Part
from .session import Session
from .message import Message
from .framing import DELIMITER


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
