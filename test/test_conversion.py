#!/usr/bin/env python3
# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import enum
import random
import warnings

import id3hdr
from id3hdr.errors import *
from id3hdr.conversion import *

class SyncsafeTestCase(unittest.TestCase):
    def testDecode(self):
        self.assertEqual(Syncsafe.decode(b"\x00\x00\x00\x00"), 0)
        self.assertEqual(Syncsafe.decode(b"\x00\x00\x00\x7F"), 127)
        self.assertEqual(Syncsafe.decode(b"\x00\x00\x01\x00"), 128)
        self.assertEqual(Syncsafe.decode(b"\x00\x00\x01\x7F"), 255)
        self.assertEqual(Syncsafe.decode(b"\x00\x00\x02\x01"), 257)
        self.assertEqual(Syncsafe.decode(b"\x7F\x7F\x7F\x7F"), (1 << 28) - 1)
        self.assertEqual(Syncsafe.decode(bytearray(b"\x01\x00\x00\x00")), 1 << 21)

    def testDecodeIgnoresTrailingData(self):
        self.assertEqual(Syncsafe.decode(b"\x00\x00\x02\x01\xFF"), 257)

    def testDecodeTruncated(self):
        for data in b"", b"\x00", b"\x00\x00\x00":
            self.assertRaises(SizeError, Syncsafe.decode, data)

    def testInvalidByte(self):
        for index in range(4):
            for value in 0x80, 0xC3, 0xFF:
                data = bytearray(4)
                data[index] = value
                with self.assertRaises(InvalidByteError) as cm:
                    Syncsafe.decode(data)
                self.assertEqual(cm.exception.index, index)
                self.assertEqual(cm.exception.value, value)

    def testInvalidByteStopsAtFirst(self):
        # Both bytes 1 and 3 are bad; only the first one is reported.
        with self.assertRaises(InvalidByteError) as cm:
            Syncsafe.decode(b"\x00\x80\x00\xFF")
        self.assertEqual((cm.exception.index, cm.exception.value), (1, 0x80))

        class Probe(bytes):
            seen = []
            def __getitem__(self, index):
                self.seen.append(index)
                return super().__getitem__(index)
        self.assertRaises(InvalidByteError, Syncsafe.decode, Probe(b"\x00\xFF\x00\x00"))
        self.assertEqual(Probe.seen, [0, 1])

    def testEncode(self):
        self.assertEqual(Syncsafe.encode(0), b"\x00\x00\x00\x00")
        self.assertEqual(Syncsafe.encode(128), b"\x00\x00\x01\x00")
        self.assertEqual(Syncsafe.encode(257), b"\x00\x00\x02\x01")
        self.assertEqual(Syncsafe.encode((1 << 28) - 1), b"\x7F\x7F\x7F\x7F")

    def testEncodeRange(self):
        for value in 1 << 28, (1 << 32) - 1, 1 << 40, -1:
            with self.assertRaises(SizeOverflowError) as cm:
                Syncsafe.encode(value)
            self.assertEqual(cm.exception.value, value)
        for value in 1.0, "12", None, True:
            with self.assertRaises(SizeTypeError) as cm:
                Syncsafe.encode(value)
            self.assertTrue(isinstance(cm.exception, TypeError))
            self.assertEqual(cm.exception.value, value)

    def testEncodeIntSubclass(self):
        class Size(enum.IntEnum):
            TAG = 257
        self.assertEqual(Syncsafe.encode(Size.TAG), b"\x00\x00\x02\x01")

    def testRoundTrip(self):
        values = [0, 1, 0x7F, 0x80, 0x3FFF, 0x4000, 0x1FFFFF, 0x200000,
                  (1 << 28) - 1]
        values.extend(random.randint(0, (1 << 28) - 1) for i in range(200))
        for value in values:
            data = Syncsafe.encode(value)
            self.assertEqual(len(data), 4)
            self.assertTrue(all(b < 0x80 for b in data))
            self.assertEqual(Syncsafe.decode(data), value)

    def testFunctions(self):
        self.assertEqual(decode_synchsafe(b"\x00\x00\x01\x7F"), 255)
        self.assertEqual(encode_synchsafe(255), b"\x00\x00\x01\x7F")
        self.assertTrue(id3hdr.decode_synchsafe is decode_synchsafe)

class Int8TestCase(unittest.TestCase):
    def testDecode(self):
        self.assertEqual(Int8.decode(b""), 0)
        self.assertEqual(Int8.decode(b"\x00\x00\x01\x00"), 256)
        self.assertEqual(Int8.decode(b"\x00\x00\x01\xFF"), 511)
        self.assertEqual(Int8.decode(b"\xFF\xFF\xFF\xFF"), (1 << 32) - 1)

suite = unittest.TestSuite([
        unittest.TestLoader().loadTestsFromTestCase(SyncsafeTestCase),
        unittest.TestLoader().loadTestsFromTestCase(Int8TestCase)])

if __name__ == "__main__":
    warnings.simplefilter("always", id3hdr.Warning)
    unittest.main(defaultTest="suite")
