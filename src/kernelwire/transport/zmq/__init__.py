"""ZeroMQ transport."""

from .multipart import SocketTransport
