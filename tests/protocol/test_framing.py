import pytest

import kernelwire
from kernelwire.protocol import accessors, framing, request, sign
from kernelwire.protocol.errors import (
    FramingError,
    InvalidSignatureError,
    MalformedMessageError,
    UnsignedMessageError,
)
from kernelwire.protocol.framing import DELIMITER
from kernelwire.protocol.types import MsgType


def test_frame_layout(session):

    msg_id, frames = framing.to_frames(session, MsgType.EXECUTE_REQUEST,
                                       request.execute_request('x = 1'),
                                       identities=[b'id1', 'id2'],
                                       buffers=[b'\xff\xfe'])

    assert frames[0] == b'id1'
    assert frames[1] == b'id2'
    assert frames[2] == DELIMITER
    assert frames[3] == sign.sign(session, frames[4:8]).encode()
    assert frames[8] == b'\xff\xfe'
    assert len(frames) == 9


def test_split_identities():

    parts = [b'id1', b'id2', DELIMITER, b'sig', b'hdr', b'phdr', b'meta', b'content']

    identities, rest = framing.split_identities(parts)
    assert identities == [b'id1', b'id2']
    assert rest == [b'sig', b'hdr', b'phdr', b'meta', b'content']

    identities, rest = framing.split_identities([DELIMITER, b'sig'])
    assert identities == []
    assert rest == [b'sig']


def test_no_delimiter(session):

    with pytest.raises(FramingError) as caught:
        framing.split_identities([b'id1', b'sig', b'hdr'])

    assert 'delimiter not found' in str(caught.value)

    with pytest.raises(FramingError):
        framing.from_frames(session, [])


def test_too_short(session):

    parts = [b'id1', DELIMITER, b'sig', b'{}', b'{}', b'{}']

    with pytest.raises(MalformedMessageError):
        framing.from_frames(session, parts)

    # A malformed message is a kind of framing error.

    with pytest.raises(FramingError):
        framing.from_frames(session, parts)


def test_kernel_info_round_trip():

    session = kernelwire.Session(key='abc')

    msg_id, frames = framing.to_frames(session, MsgType.KERNEL_INFO_REQUEST,
                                       request.kernel_info_request())

    identities, message = framing.from_frames(session, frames)

    assert identities == []
    assert message.msg_type is MsgType.KERNEL_INFO_REQUEST
    assert message.msg_id == msg_id
    assert accessors.content(message) == {}
    assert message.buffers == []


def test_lazy_parts(session):

    msg_id, frames = framing.to_frames(session, MsgType.EXECUTE_REQUEST,
                                       request.execute_request('1 + 1'),
                                       metadata={'cell': 3},
                                       buffers=[b'one', b'two'])

    identities, message = framing.from_frames(session, frames)

    assert message.header.state == 'both'
    assert message.parent_header.state == 'both'
    assert message.metadata.state == 'raw'
    assert message.content.state == 'raw'

    assert accessors.content(message)['code'] == '1 + 1'
    assert message.content.state == 'both'
    assert message.metadata.state == 'raw'

    assert message.buffers == [b'one', b'two']
    assert list(message) == frames[2:6]


def test_tamper(session):

    msg_id, frames = framing.to_frames(session, MsgType.EXECUTE_REQUEST,
                                       request.execute_request('print(1)'))

    content = bytearray(frames[-1])
    content[0] ^= 0x01
    frames[-1] = bytes(content)

    with pytest.raises(InvalidSignatureError) as caught:
        framing.from_frames(session, frames)

    assert caught.value.signature == frames[1].decode()


def test_tampered_buffer_is_not_detected(session):

    msg_id, frames = framing.to_frames(session, MsgType.COMM_MSG,
                                       request.comm_msg('c1'),
                                       buffers=[b'abc'])

    frames[-1] = b'abd'
    identities, message = framing.from_frames(session, frames)
    assert message.buffers == [b'abd']


def test_unsigned_message(session, unsigned):

    msg_id, frames = framing.to_frames(unsigned, MsgType.KERNEL_INFO_REQUEST)
    assert frames[1] == b''

    with pytest.raises(UnsignedMessageError):
        framing.from_frames(session, frames)

    identities, message = framing.from_frames(unsigned, frames)
    assert message.msg_id == msg_id


def test_unsigned_session_skips_verification(session, unsigned):

    msg_id, frames = framing.to_frames(session, MsgType.KERNEL_INFO_REQUEST)
    frames[-1] = b'{"tampered": true}'

    identities, message = framing.from_frames(unsigned, frames)
    assert accessors.content(message) == {'tampered': True}


def test_wrong_key(session):

    other = kernelwire.Session(key='xyz')
    msg_id, frames = framing.to_frames(other, MsgType.KERNEL_INFO_REQUEST)

    with pytest.raises(InvalidSignatureError):
        framing.from_frames(session, frames)


def test_identities_preserved(session):

    msg_id, frames = framing.to_frames(session, MsgType.KERNEL_INFO_REQUEST,
                                       identities=[b'router-a', b'router-b'])

    identities, message = framing.from_frames(session, frames)
    assert identities == [b'router-a', b'router-b']


def test_header_not_an_object(unsigned):

    frames = [DELIMITER, b'', b'"just text"', b'{}', b'{}', b'{}']

    with pytest.raises(MalformedMessageError):
        framing.from_frames(unsigned, frames)


def test_header_not_utf8(unsigned):

    frames = [DELIMITER, b'', b'\xff\xfe', b'{}', b'{}', b'{}']

    with pytest.raises(MalformedMessageError):
        framing.from_frames(unsigned, frames)


def test_content_not_utf8(unsigned):

    msg_id, frames = framing.to_frames(unsigned, MsgType.STREAM)
    frames[-1] = b'\xff\xfe'

    identities, message = framing.from_frames(unsigned, frames)
    assert isinstance(accessors.content(message), str)


def test_non_json_content(unsigned):

    msg_id, frames = framing.to_frames(unsigned, MsgType.STREAM)
    frames[-1] = b'opaque text'

    identities, message = framing.from_frames(unsigned, frames)
    assert accessors.content(message) == 'opaque text'


def test_reply_reuses_parent_header(session):

    msg_id, frames = framing.to_frames(session, MsgType.EXECUTE_REQUEST,
                                       request.execute_request('x'))
    identities, received = framing.from_frames(session, frames)

    reply = kernelwire.protocol.envelope.build(session, MsgType.EXECUTE_REPLY,
                                               {'status': 'ok'},
                                               parent_header=received)

    assert reply.parent_header.raw == frames[2]
    assert reply.parent_header is not received.header

    frames = framing.serialize(session, reply, identities=[b'client'])
    identities, decoded = framing.from_frames(session, frames)

    assert identities == [b'client']
    assert accessors.parent_id(decoded) == msg_id
    assert accessors.parent_type(decoded) is MsgType.EXECUTE_REQUEST


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
