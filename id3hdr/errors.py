# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

# Exceptions keep their constructor arguments in args (cls(*args) must
# rebuild them); messages are rendered by __str__.

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class TagWarning(Warning): pass
class FrameWarning(Warning): pass


class SizeError(Error, ValueError): pass

class InvalidByteError(SizeError):
    "A syncsafe integer contains a byte with its high bit set."
    def __init__(self, index, value):
        super().__init__(index, value)
        self.index = index
        self.value = value

    def __str__(self):
        return "Invalid syncsafe byte (pos: {0}, value: 0x{1:02X})".format(
            self.index, self.value)

class SizeOverflowError(SizeError):
    "Value cannot be represented as a 28-bit syncsafe integer."
    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return "Value out of syncsafe range: {0!r}".format(self.value)

class SizeTypeError(SizeError, TypeError):
    "Value is not an integer."
    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return "Not an integer: {0!r}".format(self.value)


class _WrappedSizeError:
    # Mixin for header/frame errors caused by a bad size field at offset.
    _what = None

    def __init__(self, error, offset):
        super().__init__(error, offset)
        self.error = error
        self.offset = offset
        self.value = getattr(error, "value", None)
        self.index = None
        if isinstance(error, InvalidByteError):
            self.index = offset + error.index

    def __str__(self):
        if self.index is not None:
            return "Invalid {0} size byte (pos: {1}, value: 0x{2:02X})".format(
                self._what, self.index, self.value)
        return "Invalid {0} size: {1}".format(self._what, self.error)


class HeaderError(Error, ValueError): pass

class HeaderTruncatedError(HeaderError, EOFError):
    def __init__(self, length):
        super().__init__(length)
        self.length = length

    def __str__(self):
        return "ID3v2 header truncated ({0} bytes)".format(self.length)

class BadMagicError(HeaderError):
    def __init__(self, magic):
        super().__init__(magic)
        self.magic = magic

    def __str__(self):
        return "ID3v2 tag not found (magic {0!r})".format(self.magic)

class ReservedVersionByteError(HeaderError):
    def __init__(self, field, value=0xFF):
        super().__init__(field, value)
        self.field = field
        self.value = value

    def __str__(self):
        return "Reserved value 0x{0:02X} in ID3v2 {1} byte".format(
            self.value, self.field)

class HeaderSizeError(_WrappedSizeError, HeaderError):
    _what = "tag"

    def __init__(self, error, offset=6):
        super().__init__(error, offset)


class FrameError(Error, ValueError): pass

class FrameTruncatedError(FrameError, EOFError):
    def __init__(self, length):
        super().__init__(length)
        self.length = length

    def __str__(self):
        return "Frame header truncated ({0} bytes)".format(self.length)

class BadIdentifierError(FrameError):
    def __init__(self, identifier, reason=None):
        super().__init__(identifier, reason)
        self.identifier = identifier
        self.reason = reason

    def __str__(self):
        msg = "Invalid frame id {0!r}".format(self.identifier)
        if self.reason:
            msg += " ({0})".format(self.reason)
        return msg

class FrameSizeError(_WrappedSizeError, FrameError):
    _what = "frame"

    def __init__(self, error, offset=4):
        super().__init__(error, offset)
