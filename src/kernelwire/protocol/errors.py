""" Exceptions raised by the protocol layer. Every failure is raised at the
    point of detection; nothing here is retried or recovered internally.
"""


class ProtocolError(Exception):
    """ Base class for all protocol-layer errors. """


class FramingError(ProtocolError):
    """ A received frame does not have the expected multipart structure. """


class MalformedMessageError(FramingError):
    """ The delimiter was found, but too few parts follow it. """


class UnsignedMessageError(ProtocolError):
    """ A message arrived without a signature on a session that signs. """


class InvalidSignatureError(ProtocolError):
    """ The signature attached to a message does not match its contents.
        The offending signature is retained as the *signature* attribute.
    """

    def __init__(self, signature, message=None):

        if message is None:
            message = 'invalid message signature: ' + repr(signature)

        ProtocolError.__init__(self, message)
        self.signature = signature


class InvalidMessageTypeError(ProtocolError, ValueError):
    """ A message type that is not a member of the type registry. """


class ContentShapeError(ProtocolError, ValueError):
    """ Message content, or the parameters used to build it, failed a
        type, domain, or required-field check.
    """


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
