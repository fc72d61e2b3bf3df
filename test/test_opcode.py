#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from c8vm.opcode import DecodeError, Opcode


class TestOpcode(unittest.TestCase):
    def test_opcode_fields(self):
        op = Opcode(0xD12A)
        self.assertEqual(0xD, op.group)
        self.assertEqual(0x1, op.x)
        self.assertEqual(0x2, op.y)
        self.assertEqual(0xA, op.n)
        self.assertEqual(0x2A, op.nn)
        self.assertEqual(0x12A, op.nnn)

    def test_opcode_read_big_endian(self):
        self.assertEqual(0xFFFE, Opcode.read(bytearray(b"\xFF\xFE")))
        self.assertEqual(0x6005, Opcode.read(memoryview(bytearray(b"\x60\x05\x70"))))

    def test_opcode_read_insufficient_bytes(self):
        self.assertRaises(DecodeError, Opcode.read, b"\x12")
        self.assertRaises(DecodeError, Opcode.read, b"")

    def test_opcode_immutable(self):
        op = Opcode(0x1234)
        self.assertRaises(AttributeError, setattr, op, "x", 5)
        self.assertEqual(hash(0x1234), hash(op))

    def test_opcode_repr(self):
        self.assertEqual("Opcode(0x00e0)", repr(Opcode(0x00E0)))
