"""ZeroMQ multipart transport.

Wraps an already connected (or bound) ZeroMQ socket. Which socket type to use
and where to connect it is the caller's business: DEALER for the shell,
control, and stdin channels, SUB for iopub.
"""

from __future__ import annotations

import threading
from typing import List, Optional, Sequence

import zmq

from ..base import Transport, TransportClosed, TransportTimeout


class SocketTransport(Transport):
    """Send and receive multipart frames on a single ZeroMQ socket."""

    def __init__(self, socket: zmq.Socket):
        self.socket = socket

        # The lock around the ZeroMQ socket is necessary in a multithreaded
        # application; otherwise, if two different threads both invoke
        # send_multipart(), the message parts can and will get mixed together.

        self._lock = threading.Lock()
        self._poller = zmq.Poller()
        self._poller.register(socket, zmq.POLLIN)

    @property
    def is_open(self) -> bool:
        return not self.socket.closed

    def send(self, frames: Sequence[bytes]) -> None:
        if self.socket.closed:
            raise TransportClosed("send on a closed socket")

        with self._lock:
            self.socket.send_multipart(list(frames))

    def receive(self, timeout: Optional[float] = None) -> List[bytes]:
        if self.socket.closed:
            raise TransportClosed("receive on a closed socket")

        if timeout is not None:
            ready = dict(self._poller.poll(int(timeout * 1000)))
            if self.socket not in ready:
                raise TransportTimeout(f"no message in {timeout:.2f} sec")

        return self.socket.recv_multipart()

    def close(self) -> None:
        if self.socket.closed:
            return

        self._poller.unregister(self.socket)
        self.socket.close(linger=0)
