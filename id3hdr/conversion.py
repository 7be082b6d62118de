# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Integer encodings used in ID3v2 headers."""

from id3hdr.errors import *

class Syncsafe:
    """Conversion to/from syncsafe integers.

    Syncsafe integers are big-endian 7-bit byte sequences: the high bit
    of every byte is zero, so that an MPEG frame sync pattern can never
    appear inside a size field.  ID3v2 uses four of them, giving 28
    significant bits.
    """
    width = 4
    max_value = (1 << 28) - 1

    @staticmethod
    def decode(data):
        """Decodes a 4-byte syncsafe integer.

        Raises InvalidByteError on the first byte that has its high bit
        set; bytes after that one are not examined.
        """
        if len(data) < Syncsafe.width:
            raise SizeError("Syncsafe integer truncated ({0} bytes)"
                            .format(len(data)))
        value = 0
        for i in range(Syncsafe.width):
            b = data[i]
            if b & 0x80:
                raise InvalidByteError(i, b)
            value = (value << 7) | b
        return value

    @staticmethod
    def encode(i):
        """Encodes a nonnegative integer below 2**28 into 4 syncsafe bytes.

        Values that would not survive a round trip raise SizeOverflowError;
        non-integers raise SizeTypeError.
        """
        if not isinstance(i, int) or isinstance(i, bool):
            raise SizeTypeError(i)
        if i < 0 or i > Syncsafe.max_value:
            raise SizeOverflowError(i)
        return bytes((i >> (7 * (Syncsafe.width - 1 - n))) & 0x7F
                     for n in range(Syncsafe.width))

class Int8:
    """Conversion from binary integer values of any length."""

    @staticmethod
    def decode(data):
        "Decodes an 8-bit big-endian integer of any length"
        value = 0
        for b in data:
            value <<= 8
            value += b
        return value

def decode_synchsafe(data):
    return Syncsafe.decode(data)

def encode_synchsafe(value):
    return Syncsafe.encode(value)
