''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps`.
'''

# The business about conditionally importing the libraries is intended to
# avoid importing less efficient libraries if they are not available. With
# the right build process this could be determined at build time, instead
# of at run time.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


def encoder(hook=None):
    """ Return a callable that serializes a Python value to JSON bytes. The
        optional *hook* is invoked for any value the backend cannot natively
        represent, and must return something it can.
    """

    if msgspec is not None:
        return msgspec.json.Encoder(enc_hook=hook).encode

    if orjson is not None:
        def encode(value):
            return orjson.dumps(value, default=hook)
        return encode

    def encode(value):
        return json.dumps(value, default=hook, separators=(',', ':')).encode()
    return encode


if msgspec is not None:
    decoder = msgspec.json.Decoder()
    dumps = msgspec.json.Encoder().encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError
else:
    # The msgspec 'encode' operation returns bytes, as does orjson.dumps.
    # To maintain alignment the standard library 'dumps' must do so too.

    def dumps(value):
        return json.dumps(value).encode()

    loads = json.loads
    DecodeError = json.JSONDecodeError

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
