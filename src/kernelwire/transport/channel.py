"""A session bound to a transport.

The :class:`Channel` is the point where the protocol layer meets a transport:
outgoing messages are built, signed and framed with the channel's session
before being handed to the transport, and received frames are verified and
decoded with the same session.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..protocol import framing
from ..protocol.message import Message
from ..protocol.session import Session
from .base import Transport


class Channel:
    """Exchange kernel messages over one transport."""

    def __init__(self, transport: Transport, session: Session):
        self.transport = transport
        self.session = session

    def send(self, msg_type, content=None, parent=None, metadata=None,
             buffers: Sequence[bytes] = (), identities: Sequence[bytes] = (),
             msg_id: Optional[str] = None) -> str:
        """Build, sign and send a message; return its id. The *parent* may
        be a received :class:`Message` or a header mapping."""

        msg_id, frames = framing.to_frames(
            self.session, msg_type, content,
            parent_header=parent,
            metadata=metadata,
            msg_id=msg_id,
            identities=identities,
            buffers=buffers,
        )

        self.transport.send(frames)
        return msg_id

    def send_message(self, message: Message, identities: Sequence[bytes] = ()) -> None:
        """Send an already built message."""
        self.transport.send(framing.serialize(self.session, message, identities))

    def recv(self, timeout: Optional[float] = None) -> Tuple[List[bytes], Message]:
        """Receive the next message. Returns the routing identities and the
        decoded message; protocol errors propagate to the caller."""

        frames = self.transport.receive(timeout)
        return framing.from_frames(self.session, frames)

    def close(self) -> None:
        self.transport.close()
