import pytest

from kernelwire.protocol import part, request
from kernelwire.protocol.errors import ContentShapeError, InvalidMessageTypeError
from kernelwire.protocol.part import EMPTY
from kernelwire.protocol.types import MsgType


class Marker:
    """ Stand-in for an editor marker: something that is not an integer,
        but knows its integer offset.
    """

    def __init__(self, position):
        self.position = position

    def __index__(self):
        return self.position


def test_execute():

    content = request.execute_request('print(1)')

    assert content['code'] == 'print(1)'
    assert content['silent'] is False
    assert content['store_history'] is True
    assert content['allow_stdin'] is True
    assert content['stop_on_error'] is False
    assert content['user_expressions'] is EMPTY

    encoded = part.decode(part.encode(content))
    assert encoded['silent'] is False
    assert encoded['user_expressions'] == {}

    content = request.execute_request('x', silent=True, user_expressions={'y': 'x + 1'})
    assert content['silent'] is True
    assert content['user_expressions'] == {'y': 'x + 1'}


def test_execute_validation():

    with pytest.raises(ContentShapeError):
        request.execute_request(42)

    with pytest.raises(ContentShapeError):
        request.execute_request(b'bytes are not code')

    with pytest.raises(ContentShapeError):
        request.execute_request('x', silent=None)

    with pytest.raises(ContentShapeError):
        request.execute_request('x', store_history=1)

    with pytest.raises(ContentShapeError):
        request.execute_request('x', user_expressions=['y'])


def test_inspect():

    content = request.inspect_request('len', 3)
    assert content == {'code': 'len', 'cursor_pos': 3, 'detail_level': 0}

    content = request.inspect_request('len', Marker(2), detail_level=1)
    assert content['cursor_pos'] == 2
    assert type(content['cursor_pos']) is int
    assert content['detail_level'] == 1

    for bad in (2, -1, None, '0', True, 1.0):
        with pytest.raises(ContentShapeError):
            request.inspect_request('len', 3, detail_level=bad)

    for bad in ('3', 3.0, None, True):
        with pytest.raises(ContentShapeError):
            request.inspect_request('len', bad)


def test_complete():

    content = request.complete_request('impo', Marker(4))
    assert content == {'code': 'impo', 'cursor_pos': 4}

    with pytest.raises(ContentShapeError):
        request.complete_request(None, 4)


def test_history_tail():

    with pytest.raises(ContentShapeError):
        request.history_request('tail')

    content = request.history_request('tail', n=5)
    assert content['n'] == 5
    assert content['hist_access_type'] == 'tail'
    assert content['output'] is False
    assert content['raw'] is True
    for absent in ('session', 'start', 'stop', 'pattern', 'unique'):
        assert absent not in content

    # Fields irrelevant to the access type are dropped.

    content = request.history_request('tail', n=5, start=1)
    assert 'start' not in content


def test_history_range():

    content = request.history_request('range', session=0, start=1, stop=10)
    assert content['session'] == 0
    assert content['start'] == 1
    assert content['stop'] == 10
    assert 'n' not in content

    with pytest.raises(ContentShapeError):
        request.history_request('range', session=0, start=1)

    with pytest.raises(ContentShapeError):
        request.history_request('range', session='0', start=1, stop=2)


def test_history_search():

    content = request.history_request('search', pattern='import*', unique=True, n=10)
    assert content['pattern'] == 'import*'
    assert content['unique'] is True
    assert content['n'] == 10

    with pytest.raises(ContentShapeError):
        request.history_request('search', pattern='import*', n=10)

    with pytest.raises(ContentShapeError):
        request.history_request('search', pattern='import*', unique='yes', n=10)


def test_history_access_type():

    for bad in ('head', None, 'TAIL', ['tail']):
        with pytest.raises(ContentShapeError):
            request.history_request(bad, n=5)


def test_empty_requests():

    assert request.kernel_info_request() is EMPTY
    assert request.interrupt_request() is EMPTY
    assert request.comm_info_request() is EMPTY
    assert request.comm_info_request(target_name='jupyter.widget') == {'target_name': 'jupyter.widget'}


def test_comm():

    content = request.comm_open('c1', 'jupyter.widget', {'state': {}})
    assert content == {'comm_id': 'c1', 'target_name': 'jupyter.widget', 'data': {'state': {}}}

    content = request.comm_msg('c1')
    assert content['data'] is EMPTY

    content = request.comm_close('c1', {'reason': 'done'})
    assert content['data'] == {'reason': 'done'}

    with pytest.raises(ContentShapeError):
        request.comm_open(1, 'jupyter.widget')

    with pytest.raises(ContentShapeError):
        request.comm_open('c1', None)

    with pytest.raises(ContentShapeError):
        request.comm_msg('c1', data='not a mapping')


def test_shutdown_and_input():

    assert request.shutdown_request() == {'restart': False}
    assert request.shutdown_request(restart=True) == {'restart': True}
    assert request.input_reply('typed') == {'value': 'typed'}

    with pytest.raises(ContentShapeError):
        request.shutdown_request(restart='yes')

    with pytest.raises(ContentShapeError):
        request.input_reply(None)


def test_extra_fields():

    content = request.execute_request('x', experimental=[1, 2])
    assert content['experimental'] == [1, 2]

    content = request.kernel_info_request(extension='value')
    assert content == {'extension': 'value'}


def test_dispatch():

    content = request.content('execute_request', code='x')
    assert content['code'] == 'x'

    content = request.content(MsgType.HISTORY_REQUEST, hist_access_type='tail', n=3)
    assert content['n'] == 3

    assert request.content(MsgType.KERNEL_INFO_REQUEST) is EMPTY

    with pytest.raises(InvalidMessageTypeError):
        request.content('status')

    with pytest.raises(InvalidMessageTypeError):
        request.content('frobnicate_request')

    with pytest.raises(ContentShapeError):
        request.content('execute_request')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
