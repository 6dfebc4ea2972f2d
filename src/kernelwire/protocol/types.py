""" The closed set of message types understood by this implementation, and
    the mapping between the symbolic :class:`MsgType` members and the
    strings used to represent them on the wire.
"""

import enum

from .errors import InvalidMessageTypeError


@enum.unique
class MsgType(enum.Enum):
    """ Symbolic message types. The value of each member is its wire name;
        :func:`enum.unique` guarantees no two members share a wire name,
        which keeps the mapping a bijection.
    """

    # Control channel.

    INTERRUPT_REQUEST = 'interrupt_request'
    INTERRUPT_REPLY = 'interrupt_reply'
    SHUTDOWN_REQUEST = 'shutdown_request'
    SHUTDOWN_REPLY = 'shutdown_reply'
    DEBUG_REQUEST = 'debug_request'
    DEBUG_REPLY = 'debug_reply'

    # Stdin channel.

    INPUT_REQUEST = 'input_request'
    INPUT_REPLY = 'input_reply'

    # Shell channel.

    KERNEL_INFO_REQUEST = 'kernel_info_request'
    KERNEL_INFO_REPLY = 'kernel_info_reply'
    EXECUTE_REQUEST = 'execute_request'
    EXECUTE_REPLY = 'execute_reply'
    INSPECT_REQUEST = 'inspect_request'
    INSPECT_REPLY = 'inspect_reply'
    COMPLETE_REQUEST = 'complete_request'
    COMPLETE_REPLY = 'complete_reply'
    HISTORY_REQUEST = 'history_request'
    HISTORY_REPLY = 'history_reply'
    IS_COMPLETE_REQUEST = 'is_complete_request'
    IS_COMPLETE_REPLY = 'is_complete_reply'
    COMM_INFO_REQUEST = 'comm_info_request'
    COMM_INFO_REPLY = 'comm_info_reply'
    CONNECT_REQUEST = 'connect_request'
    CONNECT_REPLY = 'connect_reply'

    # Comm messages may travel in either direction.

    COMM_OPEN = 'comm_open'
    COMM_MSG = 'comm_msg'
    COMM_CLOSE = 'comm_close'

    # IOPub channel.

    STATUS = 'status'
    STREAM = 'stream'
    DISPLAY_DATA = 'display_data'
    UPDATE_DISPLAY_DATA = 'update_display_data'
    EXECUTE_INPUT = 'execute_input'
    EXECUTE_RESULT = 'execute_result'
    ERROR = 'error'
    CLEAR_OUTPUT = 'clear_output'
    DEBUG_EVENT = 'debug_event'


    def __str__(self):
        return self.value


# end of class MsgType


_by_tag = dict((tag, tag.value) for tag in MsgType)
_by_string = dict((string, tag) for tag, string in _by_tag.items())


def tag_to_string(tag):
    """ Return the wire name for the supplied :class:`MsgType` member.
    """

    try:
        return _by_tag[tag]
    except (KeyError, TypeError):
        raise InvalidMessageTypeError('not a message type: ' + repr(tag))


def string_to_tag(string):
    """ Return the :class:`MsgType` member for the supplied wire name.
    """

    try:
        return _by_string[string]
    except (KeyError, TypeError):
        raise InvalidMessageTypeError('unknown message type: ' + repr(string))


def normalize(msg_type):
    """ Accept either a :class:`MsgType` member or its wire name, and return
        the :class:`MsgType` member.
    """

    if isinstance(msg_type, MsgType):
        if msg_type in _by_tag:
            return msg_type
        raise InvalidMessageTypeError('not a message type: ' + repr(msg_type))

    if isinstance(msg_type, str):
        return string_to_tag(msg_type)

    raise InvalidMessageTypeError('not a message type: ' + repr(msg_type))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
