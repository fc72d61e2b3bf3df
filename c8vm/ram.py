#!/usr/bin/env python3

"""
RAM Emulator

A fixed 4KB address space.  Supports reading and writing of blocks of memory
or individual bytes.  Every access is bounds-checked: there is no wrapping at
the top of memory, so an instruction which strays past 0xFFF halts the machine
rather than silently corrupting the low addresses where the font lives.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import RAM_SIZE


class RAMError(Exception):
    pass


class RAM:
    def __init__(self, mem_size=RAM_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_overflow(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        # Slicing past the end is allowed, so the caller can see how many bytes actually remain
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_overflow(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        block_top = location + block_size
        self.check_overflow(block_top - 1)
        self.mem[location:block_top] = block

    def check_overflow(self, location):
        if location > self.mem_top or location < 0:
            raise RAMError("Memory overflow at address 0x{:04x}".format(location))
