# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import id3hdr.conversion
import id3hdr.flags
import id3hdr.header
import id3hdr.frames

from id3hdr.errors import *
from id3hdr.conversion import Syncsafe, decode_synchsafe, encode_synchsafe
from id3hdr.flags import HeaderFlags, FrameStatus, FrameFormat
from id3hdr.header import Header, decode_header, encode_header, read_header
from id3hdr.frames import Frame, decode_frame_header, encode_frame_header, read_frame_header

version = (0, 1, 0)
versionstr = ".".join((str(v) for v in version))
