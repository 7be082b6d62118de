# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Bit-mapped flag bytes of ID3v2 tag and frame headers."""

class flag:
    "A named bit of a Flags byte, readable as a boolean."
    def __init__(self, mask, doc=None):
        self.mask = mask
        self.__doc__ = doc

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, cls=None):
        if obj is None:
            return self
        return bool(obj._bits & self.mask)

    def __set__(self, obj, value):
        raise AttributeError("Flags are read-only; construct a new value")

class Flags:
    """A single byte of bit flags.

    Subclasses declare their named bits as flag() attributes and the
    remaining bits in _reserved_mask.  Values are immutable and compare
    equal when their raw bytes are equal.

    >>> s = FrameStatus(read_only=True)
    >>> s.read_only, s.to_bits()
    (True, 16)
    >>> FrameStatus.from_bits(0x50) == FrameStatus(tag_alter_preservation=True, read_only=True)
    True
    """
    __slots__ = ("_bits",)
    _reserved_mask = 0x00

    def __init__(self, bits=0, **flags):
        if type(bits) is not int:
            raise TypeError("Not a byte: {0!r}".format(bits))
        if bits not in range(256):
            raise ValueError("Invalid flag byte: {0}".format(bits))
        for name, value in flags.items():
            bit = getattr(type(self), name, None)
            if not isinstance(bit, flag):
                raise TypeError("Unknown {0} flag: {1}".format(type(self).__name__, name))
            if value:
                bits |= bit.mask
            else:
                bits &= ~bit.mask
        object.__setattr__(self, "_bits", bits)

    def __setattr__(self, name, value):
        raise AttributeError("Flags are read-only; construct a new value")

    def __delattr__(self, name):
        raise AttributeError("Flags are read-only")

    def __reduce__(self):
        return (type(self), (self._bits,))

    @classmethod
    def from_bits(cls, bits):
        return cls(bits)

    def to_bits(self):
        return self._bits

    @property
    def reserved(self):
        "The reserved bits of this byte, in place."
        return self._bits & self._reserved_mask

    @classmethod
    def names(cls):
        "Return the names of defined flags, most significant bit first."
        masks = {}
        for klass in reversed(cls.__mro__):
            for name, bit in vars(klass).items():
                if isinstance(bit, flag):
                    masks[name] = bit.mask
        return sorted(masks, key=masks.get, reverse=True)

    def __eq__(self, other):
        return type(self) is type(other) and self._bits == other._bits

    def __hash__(self):
        return hash((type(self), self._bits))

    def __repr__(self):
        args = ["{0}=True".format(name) for name in self.names()
                if getattr(self, name)]
        if self.reserved:
            args.append("reserved=0x{0:02X}".format(self.reserved))
        return "{0}({1})".format(type(self).__name__, ", ".join(args))


class HeaderFlags(Flags):
    "Flags byte of the ID3v2 tag header."
    __slots__ = ()
    _reserved_mask = 0x0F

    is_unsynchronized = flag(0x80, "Unsynchronisation is applied to all frames")
    extended_header = flag(0x40, "An extended header follows the header")
    experimental_indicator = flag(0x20, "Tag is in an experimental stage")
    footer_present = flag(0x10, "A 10-byte footer is present at the end of the tag")

class FrameStatus(Flags):
    "Status flags byte of an ID3v2.4 frame header."
    __slots__ = ()
    _reserved_mask = 0x0F

    unused = flag(0x80)
    tag_alter_preservation = flag(0x40, "Discard frame when the tag is altered")
    file_alter_preservation = flag(0x20, "Discard frame when the file is altered")
    read_only = flag(0x10)

class FrameFormat(Flags):
    "Format flags byte of an ID3v2.4 frame header."
    __slots__ = ()
    _reserved_mask = 0x7F

    unused = flag(0x80)
