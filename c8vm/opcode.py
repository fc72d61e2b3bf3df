#!/usr/bin/env python3

"""
Opcode Decoder

Each instruction is a single big-endian 16-bit word.  References to Vx, Vy,
byte and addr are always in the same position throughout all instructions, so
the fields are exposed as properties rather than being split per instruction:

    group - top nibble, selects the instruction family
    x     - second nibble, usually a register number
    y     - third nibble, usually a register number
    n     - bottom nibble
    nn    - bottom byte
    nnn   - bottom 12 bits, usually an address

Opcode is an int subclass, so it is immutable, hashable and can be compared or
formatted directly.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

CPU_ENDIAN = "big"  # CHIP-8 is big-endian


class DecodeError(Exception):
    pass


class Opcode(int):
    __slots__ = ()

    @classmethod
    def read(cls, block):
        if len(block) < 2:
            raise DecodeError("Insufficient bytes to decode an instruction ({} available)".format(len(block)))

        return cls(int.from_bytes(block[:2], CPU_ENDIAN, signed=False))

    @property
    def group(self):
        return (self & 0xF000) >> 12

    @property
    def x(self):
        return (self & 0xF00) >> 8

    @property
    def y(self):
        return (self & 0xF0) >> 4

    @property
    def n(self):
        return self & 0xF

    @property
    def nn(self):
        return self & 0xFF

    @property
    def nnn(self):
        return self & 0xFFF

    def __repr__(self):
        return "Opcode(0x{:04x})".format(self)
