# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""ID3v2.4 frame headers."""

from warnings import warn

from id3hdr.errors import *
from id3hdr.conversion import Syncsafe, Int8
from id3hdr.flags import FrameStatus, FrameFormat

import id3hdr.fileutil as fileutil

FRAME_HEADER_SIZE = 10

_SIZE_OFFSET = 4
_STATUS_UNKNOWN_MASK = 0x8F

class Frame:
    """The 10-byte header of a single frame: identifier, size and flags.

    size is the length of the frame body that follows the header.  A
    Frame with no arguments has an empty identifier, zero size and no
    flags set; it must be given a 4-byte identifier before it can be
    encoded.
    """
    # Work around iTunes frame size encoding bug.
    # Older versions of iTunes stored frame sizes as
    # straight 8bit integers, not syncsafe.  This is the default for
    # decode(); encode() always writes syncsafe sizes, so sizes of 128 or more
    # read with the workaround do not round-trip.
    ITUNES_WORKAROUND = False

    def __init__(self, identifier="", size=0, status=None, format=None):
        self.identifier = identifier
        self.size = size
        self.status = status if status is not None else FrameStatus()
        self.format = format if format is not None else FrameFormat()

    def __setattr__(self, name, value):
        # Accept raw bytes for the flag fields
        if name == "status" and isinstance(value, int):
            value = FrameStatus.from_bits(value)
        elif name == "format" and isinstance(value, int):
            value = FrameFormat.from_bits(value)
        super().__setattr__(name, value)

    def __eq__(self, other):
        return (isinstance(other, type(self))
                and self.identifier == other.identifier
                and self.size == other.size
                and self.status == other.status
                and self.format == other.format)

    def __repr__(self):
        args = ["identifier={0!r}".format(self.identifier),
                "size={0!r}".format(self.size)]
        if self.status != FrameStatus():
            args.append("status={0!r}".format(self.status))
        if self.format != FrameFormat():
            args.append("format={0!r}".format(self.format))
        return "{0}({1})".format(type(self).__name__, ", ".join(args))

    @classmethod
    def decode(cls, data, *, itunes_workaround=None):
        if itunes_workaround is None:
            itunes_workaround = cls.ITUNES_WORKAROUND
        if len(data) < FRAME_HEADER_SIZE:
            raise FrameTruncatedError(len(data))
        rawid = bytes(data[0:4])
        try:
            identifier = rawid.decode("utf-8")
        except UnicodeDecodeError as e:
            raise BadIdentifierError(rawid, "not valid UTF-8") from e
        if itunes_workaround:
            size = Int8.decode(data[_SIZE_OFFSET:8])
        else:
            try:
                size = Syncsafe.decode(data[_SIZE_OFFSET:8])
            except SizeError as e:
                raise FrameSizeError(e, _SIZE_OFFSET) from e

        frame = cls(identifier, size,
                    FrameStatus.from_bits(data[8]),
                    FrameFormat.from_bits(data[9]))
        if data[8] & _STATUS_UNKNOWN_MASK:
            warn("Unexpected status flags on {0} frame: 0x{1:02X}"
                 .format(identifier, data[8] & _STATUS_UNKNOWN_MASK), FrameWarning)
        return frame

    def encode(self):
        if not isinstance(self.identifier, str):
            raise BadIdentifierError(self.identifier, "not a string")
        try:
            rawid = self.identifier.encode("utf-8")
        except UnicodeEncodeError as e:
            raise BadIdentifierError(self.identifier, "not valid UTF-8") from e
        if len(rawid) != 4:
            raise BadIdentifierError(self.identifier,
                                     "{0} bytes, expected 4".format(len(rawid)))
        try:
            size = Syncsafe.encode(self.size)
        except SizeError as e:
            raise FrameSizeError(e, _SIZE_OFFSET) from e

        data = bytearray(rawid)
        data.extend(size)
        data.append(self.status.to_bits())
        data.append(self.format.to_bits())
        assert len(data) == FRAME_HEADER_SIZE
        return bytes(data)

def decode_frame_header(data, *, itunes_workaround=None):
    return Frame.decode(data, itunes_workaround=itunes_workaround)

def encode_frame_header(frame):
    return frame.encode()

def read_frame_header(filename, *, itunes_workaround=None):
    "Read the frame header at the current position of filename."
    with fileutil.opened(filename, "rb") as file:
        return Frame.decode(file.read(FRAME_HEADER_SIZE),
                            itunes_workaround=itunes_workaround)
