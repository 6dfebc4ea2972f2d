""" Builders for the content of outgoing requests. Each builder validates
    its arguments and returns a content dictionary suitable for
    :func:`envelope.build`; none of them perform any I/O or signing.

    All builders accept arbitrary additional keyword arguments, which are
    included in the content verbatim. This allows the use of protocol
    extensions not otherwise known here.
"""

import collections.abc
import operator

from . import types
from .errors import ContentShapeError, InvalidMessageTypeError
from .part import EMPTY
from .types import MsgType


def _string(name, value):

    if isinstance(value, str):
        return value

    raise ContentShapeError(name + ' must be a string, not ' + type(value).__name__)


def _integer(name, value):

    # bool is an int subclass, but True is not a meaningful cursor position
    # or history index.

    if isinstance(value, bool):
        raise ContentShapeError(name + ' must be an integer, not bool')

    try:
        return operator.index(value)
    except TypeError:
        raise ContentShapeError(name + ' must be an integer, not ' + type(value).__name__)


def _flag(name, value):

    if isinstance(value, bool):
        return value

    raise ContentShapeError(name + ' must be True or False, not ' + repr(value))


def _mapping(name, value):

    if value is None:
        return EMPTY

    if isinstance(value, collections.abc.Mapping):
        return value

    raise ContentShapeError(name + ' must be a mapping, not ' + type(value).__name__)


def _finish(content, extra):

    for key, value in extra.items():
        content[key] = value

    return content


def execute_request(code, silent=False, store_history=True,
                    user_expressions=None, allow_stdin=True,
                    stop_on_error=False, **extra):
    """ Request execution of *code* by the kernel. The boolean arguments
        are always sent explicitly, even when they match the protocol
        defaults.
    """

    content = dict()
    content['code'] = _string('code', code)
    content['silent'] = _flag('silent', silent)
    content['store_history'] = _flag('store_history', store_history)
    content['user_expressions'] = _mapping('user_expressions', user_expressions)
    content['allow_stdin'] = _flag('allow_stdin', allow_stdin)
    content['stop_on_error'] = _flag('stop_on_error', stop_on_error)

    return _finish(content, extra)


def inspect_request(code, cursor_pos, detail_level=0, **extra):
    """ Request introspection of the object at *cursor_pos* within *code*.
        The *cursor_pos* may be anything that converts to an integer offset
        via :func:`operator.index`, such as an editor marker. The
        *detail_level* must be 0 or 1.
    """

    detail_level = _integer('detail_level', detail_level)
    if detail_level not in (0, 1):
        raise ContentShapeError('detail_level must be 0 or 1, not ' + repr(detail_level))

    content = dict()
    content['code'] = _string('code', code)
    content['cursor_pos'] = _integer('cursor_pos', cursor_pos)
    content['detail_level'] = detail_level

    return _finish(content, extra)


def complete_request(code, cursor_pos, **extra):
    """ Request completions at *cursor_pos* within *code*. """

    content = dict()
    content['code'] = _string('code', code)
    content['cursor_pos'] = _integer('cursor_pos', cursor_pos)

    return _finish(content, extra)


# The fields required for each kind of history access. 'output' and 'raw'
# apply to all of them and are handled separately.

history_fields = {
    'range': ('session', 'start', 'stop'),
    'tail': ('n',),
    'search': ('pattern', 'unique', 'n'),
}


def history_request(hist_access_type, output=False, raw=True, session=None,
                    start=None, stop=None, n=None, pattern=None, unique=None,
                    **extra):
    """ Request entries from the kernel's execution history. The fields
        that must be supplied depend on the *hist_access_type*:

        * 'range': *session*, *start*, and *stop*
        * 'tail': *n*
        * 'search': *pattern*, *unique*, and *n*

        Fields that do not apply to the chosen access type are not included
        in the content.
    """

    try:
        required = history_fields[hist_access_type]
    except (KeyError, TypeError):
        raise ContentShapeError('hist_access_type must be one of range, tail, search; not ' + repr(hist_access_type))

    supplied = dict(session=session, start=start, stop=stop, n=n,
                    pattern=pattern, unique=unique)

    content = dict()
    content['hist_access_type'] = hist_access_type
    content['output'] = _flag('output', output)
    content['raw'] = _flag('raw', raw)

    for field in required:
        value = supplied[field]

        if value is None:
            raise ContentShapeError(hist_access_type + ' history request requires ' + repr(field))

        if field == 'pattern':
            value = _string(field, value)
        elif field == 'unique':
            value = _flag(field, value)
        else:
            value = _integer(field, value)

        content[field] = value

    return _finish(content, extra)


def is_complete_request(code, **extra):
    """ Ask whether *code* is complete, or whether the kernel would expect
        more input before executing it.
    """

    content = dict()
    content['code'] = _string('code', code)

    return _finish(content, extra)


def kernel_info_request(**extra):

    if extra:
        return _finish(dict(), extra)

    return EMPTY


def comm_info_request(target_name=None, **extra):
    """ List the open comms, optionally restricted to those with the given
        *target_name*.
    """

    content = dict()
    if target_name is not None:
        content['target_name'] = _string('target_name', target_name)

    if content or extra:
        return _finish(content, extra)

    return EMPTY


def comm_open(comm_id, target_name, data=None, **extra):
    """ Open a new comm with the kernel, addressed by *comm_id*. """

    content = dict()
    content['comm_id'] = _string('comm_id', comm_id)
    content['target_name'] = _string('target_name', target_name)
    content['data'] = _mapping('data', data)

    return _finish(content, extra)


def comm_msg(comm_id, data=None, **extra):

    content = dict()
    content['comm_id'] = _string('comm_id', comm_id)
    content['data'] = _mapping('data', data)

    return _finish(content, extra)


def comm_close(comm_id, data=None, **extra):

    content = dict()
    content['comm_id'] = _string('comm_id', comm_id)
    content['data'] = _mapping('data', data)

    return _finish(content, extra)


def shutdown_request(restart=False, **extra):
    """ Request that the kernel shut down, and optionally restart. """

    content = dict()
    content['restart'] = _flag('restart', restart)

    return _finish(content, extra)


def interrupt_request(**extra):

    if extra:
        return _finish(dict(), extra)

    return EMPTY


def input_reply(value, **extra):
    """ Respond to an input_request from the kernel with the user's input.
    """

    content = dict()
    content['value'] = _string('value', value)

    return _finish(content, extra)


builders = {
    MsgType.EXECUTE_REQUEST: execute_request,
    MsgType.INSPECT_REQUEST: inspect_request,
    MsgType.COMPLETE_REQUEST: complete_request,
    MsgType.HISTORY_REQUEST: history_request,
    MsgType.IS_COMPLETE_REQUEST: is_complete_request,
    MsgType.KERNEL_INFO_REQUEST: kernel_info_request,
    MsgType.COMM_INFO_REQUEST: comm_info_request,
    MsgType.COMM_OPEN: comm_open,
    MsgType.COMM_MSG: comm_msg,
    MsgType.COMM_CLOSE: comm_close,
    MsgType.SHUTDOWN_REQUEST: shutdown_request,
    MsgType.INTERRUPT_REQUEST: interrupt_request,
    MsgType.INPUT_REPLY: input_reply,
}


def content(msg_type, **params):
    """ Build the content for an outgoing message of the given *msg_type*,
        using the keyword arguments as parameters for the matching builder.
    """

    msg_type = types.normalize(msg_type)

    try:
        builder = builders[msg_type]
    except KeyError:
        raise InvalidMessageTypeError('not an outgoing request type: ' + str(msg_type))

    try:
        return builder(**params)
    except TypeError as e:
        # Missing or unexpected positional parameters.
        raise ContentShapeError(str(msg_type) + ': ' + str(e)) from e


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
