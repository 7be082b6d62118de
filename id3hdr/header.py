# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""The 10-byte header at the start of every ID3v2 tag."""

import collections
from warnings import warn

from id3hdr.errors import *
from id3hdr.conversion import Syncsafe
from id3hdr.flags import HeaderFlags

import id3hdr.fileutil as fileutil

HEADER_SIZE = 10
FOOTER_SIZE = 10

_MAGIC = b"ID3"
_RESERVED_VERSION_BYTE = 0xFF
_SIZE_OFFSET = 6

class Header(collections.namedtuple("Header", "version revision flags size")):
    """Decoded ID3v2 tag header.

    version and revision are the two version bytes (ID3v2.4.0 has
    version 4, revision 0); neither may be 0xFF.  size is the length of
    the tag after the header, excluding any footer.

    >>> Header.decode(b"ID3\\x04\\x00\\x00\\x00\\x00\\x02\\x01")
    Header(version=4, revision=0, flags=HeaderFlags(), size=257)
    """
    __slots__ = ()

    def __new__(cls, version, revision, flags=None, size=0):
        if flags is None:
            flags = HeaderFlags()
        elif isinstance(flags, int):
            flags = HeaderFlags.from_bits(flags)
        return super().__new__(cls, version, revision, flags, size)

    @classmethod
    def _make(cls, iterable):
        # _replace goes through here; keep the flags coercion of __new__
        return cls(*iterable)

    @property
    def total_size(self):
        "Length of the complete tag, including this header and the footer."
        size = self.size + HEADER_SIZE
        if self.flags.footer_present:
            size += FOOTER_SIZE
        return size

    @classmethod
    def decode(cls, data):
        if len(data) < HEADER_SIZE:
            raise HeaderTruncatedError(len(data))
        if data[0:3] != _MAGIC:
            raise BadMagicError(bytes(data[0:3]))
        if data[3] == _RESERVED_VERSION_BYTE:
            raise ReservedVersionByteError("version", data[3])
        if data[4] == _RESERVED_VERSION_BYTE:
            raise ReservedVersionByteError("revision", data[4])
        try:
            size = Syncsafe.decode(data[_SIZE_OFFSET:HEADER_SIZE])
        except SizeError as e:
            raise HeaderSizeError(e, _SIZE_OFFSET) from e

        header = cls(data[3], data[4], HeaderFlags.from_bits(data[5]), size)
        if header.version > 4:
            warn("Unknown ID3 version: 2.{0}.{1}"
                 .format(header.version, header.revision), TagWarning)
        if header.flags.reserved:
            warn("Unknown ID3v2 flags: 0x{0:02X}".format(header.flags.reserved),
                 TagWarning)
        return header

    def encode(self):
        for field in ("version", "revision"):
            value = getattr(self, field)
            if not isinstance(value, int) or value not in range(256):
                raise HeaderError("Invalid ID3v2 {0} byte: {1!r}".format(field, value))
            if value == _RESERVED_VERSION_BYTE:
                raise ReservedVersionByteError(field, value)
        try:
            size = Syncsafe.encode(self.size)
        except SizeError as e:
            raise HeaderSizeError(e, _SIZE_OFFSET) from e

        data = bytearray(_MAGIC)
        data.append(self.version)
        data.append(self.revision)
        data.append(self.flags.to_bits())
        data.extend(size)
        assert len(data) == HEADER_SIZE
        return bytes(data)

def decode_header(data):
    return Header.decode(data)

def encode_header(header):
    return header.encode()

def read_header(filename):
    """Read the tag header at the current position of filename.

    filename may be a path or a binary file object; in the latter case
    the file is left positioned just after the header.
    """
    with fileutil.opened(filename, "rb") as file:
        return Header.decode(file.read(HEADER_SIZE))
