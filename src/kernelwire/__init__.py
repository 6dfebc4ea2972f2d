""" Python implementation of the client side of the kernel messaging
    protocol. This includes the construction, signing, and framing of
    outgoing requests, and the verification and lazy decoding of received
    messages.
"""

# Utility components.

from . import json
from . import config

# The protocol layer proper.

from . import protocol
from .protocol import MsgType, Message, Session, EMPTY

# Transport adapters, built on top of the protocol layer.

from . import transport
from .transport.channel import Channel

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
