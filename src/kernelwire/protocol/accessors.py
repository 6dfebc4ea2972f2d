""" Read-only helpers over a :class:`message.Message`. Any part that has
    not been decoded yet is decoded on first access.
"""

import datetime

from .part import decode_time
from .types import MsgType


def header(message):
    return message.header.value


def parent_header(message):
    return message.parent_header.value


def metadata(message):
    return message.metadata.value


def content(message):
    return message.content.value


def msg_id(message):
    return message.msg_id


def msg_type(message):
    return message.msg_type


def session_id(message):
    return header(message).get('session')


def parent_id(message):
    """ Return the id of the message this one responds to, or None. """

    return parent_header(message).get('msg_id')


def parent_type(message):
    return parent_header(message).get('msg_type')


def timestamp(message):
    """ Return the header date as a :class:`datetime.datetime`. Locally
        built messages carry the date as text until they are decoded from
        the wire; it is converted here in either case.
    """

    when = header(message).get('date')

    if when is None or isinstance(when, datetime.datetime):
        return when

    return decode_time(when)


def content_field(message, key, default=None):
    """ Return the value of *key* in the message content, or *default* if
        the content does not have it.
    """

    found = content(message)

    try:
        return found[key]
    except (KeyError, TypeError):
        return default


def mime_data(message, mimetype):
    """ Return the representation of the message data for the requested
        *mimetype*, for example 'text/plain', or None if the message does
        not include one.
    """

    data = content_field(message, 'data')

    try:
        return data[mimetype]
    except (KeyError, TypeError):
        return None


def _execution_state(message):

    if message.msg_type != MsgType.STATUS:
        return None

    return content_field(message, 'execution_state')


def is_status_idle(message):
    return _execution_state(message) == 'idle'


def is_status_starting(message):
    return _execution_state(message) == 'starting'


def is_reply_to(message, request):
    """ Return True if *message* was sent in response to *request*, which
        may be a :class:`message.Message` or a message id.
    """

    try:
        request = request.msg_id
    except AttributeError:
        pass

    return parent_id(message) == request


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
