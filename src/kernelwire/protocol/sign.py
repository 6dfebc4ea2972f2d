""" Message signatures. A signature is the hex digest of a keyed hash over
    the concatenated serialized bytes of the header, parent header, metadata,
    and content parts, in that order. The concatenation is not delimited, so
    any change to the serialized form of any of the four parts changes the
    signature.
"""

import hmac
import logging

from .errors import InvalidSignatureError, UnsignedMessageError


log = logging.getLogger(__name__)


def sign(session, parts):
    """ Return the signature for the supplied serialized *parts*. Only the
        first four parts are signed; trailing buffers are not. An unsigned
        *session* always produces the empty string.
    """

    if not session.signed:
        return ''

    mac = hmac.new(session.key.encode('utf-8'), digestmod=session.digest)

    for part in parts[:4]:
        mac.update(part)

    return mac.hexdigest()


def verify(session, signature, parts):
    """ Raise an exception if the *signature* does not match the supplied
        serialized *parts*. Nothing is checked for an unsigned *session*,
        regardless of the signature received.
    """

    if not session.signed:
        return

    if signature == '':
        log.warning('unsigned message received on signed session %s', session.id)
        raise UnsignedMessageError('message is unsigned, session requires a signature')

    expected = sign(session, parts)

    if hmac.compare_digest(expected.encode(), signature.encode('utf-8')):
        return

    log.warning('signature mismatch on session %s', session.id)
    raise InvalidSignatureError(signature)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
