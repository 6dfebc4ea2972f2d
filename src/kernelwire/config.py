""" Configuration values shared by the protocol layer. Every value is read
    from the environment at the time it is requested, so that changes to
    the environment take effect for any message built afterwards.
"""

import os


# The version of the kernel messaging protocol implemented here. This is
# reported in the header of every outgoing message.

default_version = '5.3'
default_signature_scheme = 'hmac-sha256'


def protocol_version():
    """ Return the protocol version string to report in message headers.
        The ``KERNELWIRE_PROTOCOL_VERSION`` environment variable, if set,
        overrides the built-in default.
    """

    try:
        version = os.environ['KERNELWIRE_PROTOCOL_VERSION']
    except KeyError:
        return default_version

    version = version.strip()
    if version == '':
        return default_version

    return version


def signature_scheme():
    """ Return the default signature scheme for new sessions, for example
        ``hmac-sha256``.
    """

    return os.environ.get('KERNELWIRE_SIGNATURE_SCHEME', default_signature_scheme)


def username():
    """ Return the user name reported in message headers. The search order
        is ``KERNELWIRE_USERNAME``, ``USER``, then ``LOGNAME``; if none of
        them are set the literal string 'username' is used, which is what
        kernels expect from an anonymous client.
    """

    for variable in ('KERNELWIRE_USERNAME', 'USER', 'LOGNAME'):
        try:
            found = os.environ[variable]
        except KeyError:
            continue

        if found:
            return found

    return 'username'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
