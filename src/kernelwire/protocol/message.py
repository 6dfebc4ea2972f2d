""" A class representation of a single kernel message, either built locally
    for transmission or reconstructed from a received frame.
"""

from .part import Part


class Message:
    """ The :class:`Message` is the logical form of a message envelope: the
        four JSON parts, each a :class:`part.Part`, plus any binary buffers
        that trailed them on the wire. The message id and type are copied up
        from the header when the message is constructed; the remaining parts
        are only decoded when something asks for them.

        :ivar header: The message header, a :class:`part.Part`.
        :ivar parent_header: The header of the message this one responds to.
        :ivar metadata: Free-form metadata for the message.
        :ivar content: The message content.
        :ivar buffers: A list of raw binary buffers, possibly empty.
        :ivar msg_id: The message id, from the header.
        :ivar msg_type: The :class:`types.MsgType`, from the header.
    """

    __slots__ = ('header', 'parent_header', 'metadata', 'content',
                 'buffers', 'msg_id', 'msg_type')

    def __init__(self, header, parent_header, metadata, content, buffers=()):

        for part in (header, parent_header, metadata, content):
            if not isinstance(part, Part):
                raise TypeError('message parts must be Part instances, not ' + type(part).__name__)

        self.header = header
        self.parent_header = parent_header
        self.metadata = metadata
        self.content = content
        self.buffers = list(buffers)

        decoded = header.value
        self.msg_id = decoded.get('msg_id')
        self.msg_type = decoded.get('msg_type')


    def __iter__(self):
        """ Iterate over the serialized bytes of the four JSON parts, in wire
            order. Buffers are not included.
        """

        for part in (self.header, self.parent_header, self.metadata, self.content):
            yield part.raw


    def __repr__(self):
        return 'Message(%s, %r)' % (self.msg_type, self.msg_id)


# end of class Message


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
