"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`kernelwire.protocol` so the protocol remains
transport-agnostic. A transport moves complete multipart frames; it does not
interpret, sign, or verify them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """No frame arrived within the requested time."""


class TransportClosed(TransportError):
    """The transport was used after it was closed."""


class Transport(ABC):
    """Minimal contract for a wire-level transport."""

    @abstractmethod
    def send(self, frames: Sequence[bytes]) -> None:
        """Send one multipart frame."""

    @abstractmethod
    def receive(self, timeout: Optional[float] = None) -> List[bytes]:
        """Receive one multipart frame, blocking for at most *timeout*
        seconds; None blocks indefinitely."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection/socket."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently usable."""
        return False
