import itertools
import pytest
import zmq

import kernelwire


@pytest.fixture
def session():
    """ A signing session, using the same secret throughout the tests. """

    return kernelwire.Session(key='abc')


@pytest.fixture
def unsigned():
    return kernelwire.Session(key='')


_addresses = itertools.count()


@pytest.fixture
def zmq_pair():
    """ Two connected PAIR sockets, wrapped as transports. The inproc address
        is unique per test so that sockets from a previous test that have not
        finished closing cannot interfere.
    """

    from kernelwire.transport.zmq import SocketTransport

    context = zmq.Context.instance()
    address = 'inproc://kernelwire-test-%d' % (next(_addresses))

    server = context.socket(zmq.PAIR)
    server.bind(address)
    client = context.socket(zmq.PAIR)
    client.connect(address)

    server = SocketTransport(server)
    client = SocketTransport(client)

    yield client, server

    client.close()
    server.close()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
