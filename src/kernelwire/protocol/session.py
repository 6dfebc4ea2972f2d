""" The :class:`Session` identifies one logical connection to a kernel, and
    carries the shared secret used to sign messages exchanged over it.
"""

import dataclasses
import hashlib
import uuid

from .. import config
from .. import json


def _new_id():
    return str(uuid.uuid4())


@dataclasses.dataclass(frozen=True)
class Session:
    """ Immutable connection identity. An empty *key* disables signing
        entirely: outgoing messages carry an empty signature, and incoming
        signatures are not checked.

        :ivar id: Unique session identifier, reported in every header.
        :ivar key: The shared signing secret.
        :ivar signature_scheme: The keyed hash to sign with, 'hmac-sha256'
            unless otherwise specified.
        :ivar username: The user name reported in every header.
    """

    id: str = dataclasses.field(default_factory=_new_id)
    key: str = ''
    signature_scheme: str = dataclasses.field(default_factory=config.signature_scheme)
    username: str = dataclasses.field(default_factory=config.username)

    def __post_init__(self):

        if isinstance(self.key, bytes):
            object.__setattr__(self, 'key', self.key.decode('utf-8'))

        # Fail at construction rather than at the first signature.
        self.digest


    @property
    def digest(self):
        """ The :mod:`hashlib` algorithm name for the signature scheme. """

        scheme = self.signature_scheme
        prefix, _, algorithm = scheme.partition('-')

        if prefix != 'hmac' or algorithm not in hashlib.algorithms_available:
            raise ValueError('unsupported signature scheme: ' + repr(scheme))

        return algorithm


    @property
    def signed(self):
        return self.key != ''


    @classmethod
    def from_connection_file(cls, filename, id=None):
        """ Create a :class:`Session` using the signing key and signature
            scheme recorded in a kernel connection file. Socket addresses in
            the file are not interpreted here.
        """

        with open(filename, 'rb') as reader:
            info = json.loads(reader.read())

        key = info.get('key', '')
        scheme = info.get('signature_scheme') or config.signature_scheme()

        if id is None:
            id = _new_id()

        return cls(id=id, key=key, signature_scheme=scheme)


# end of class Session


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
