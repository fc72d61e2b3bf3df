#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from c8vm.ram import RAM, RAMError


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_default_size(self):
        self.assertEqual(0x1000, len(RAM().mem))

    def test_ram_init(self):
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_write(self):
        self.ram.write(1, 255)
        self.assertEqual("00ff000000", self.ram.mem.hex())

    def test_ram_write_block(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.ram.mem.hex())

    def test_ram_read(self):
        self.ram.write(4, 0x12)
        self.assertEqual(0x12, self.ram.read(4))

    def test_ram_read_block_short_at_top(self):
        self.assertEqual(2, len(self.ram.read_block(3, 2)))
        self.assertEqual(1, len(self.ram.read_block(4, 2)))
        self.assertEqual(0, len(self.ram.read_block(5, 2)))

    def test_ram_byte_overflow(self):
        self.assertRaises(RAMError, self.ram.write, 5, 255)
        self.assertRaises(RAMError, self.ram.read, 5)

    def test_ram_block_overflow(self):
        self.assertRaises(RAMError, self.ram.write_block, 4, bytearray(b"\xFE\xFF"))
        # Nothing should have been written
        self.assertEqual("0000000000", self.ram.mem.hex())
