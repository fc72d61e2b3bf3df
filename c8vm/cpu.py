#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Holds the register file, program counter, index register, the two timers and
the call stack, and drives the fetch/execute cycle.  The CPU keeps no clock of
its own: the machine driver decides how many instructions to run per frame
and calls tick() at 60Hz to count the timers down.

The random source used by RAND is handed in at construction so tests can
supply a fixed sequence.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from functools import partial
from random import Random
from .constants import PROGRAM_LOCATION
from .debugger import Debugger
from .instructions import InstructionDispatcher
from .opcode import DecodeError, Opcode
from .stack import Stack


class CPU:
    def __init__(self, stack=None, debugger=None, rand=None):
        self.stack = Stack() if stack is None else stack
        self.debugger = Debugger() if debugger is None else debugger
        self.live_debug = self.debugger.is_live()

        if rand is None:
            # Private generator, so nothing else in the process can disturb the sequence
            rand = partial(Random().randint, 0, 0xFF)

        self.rand = rand
        self.dispatcher = InstructionDispatcher()

        # Initialise registers
        self.v = memoryview(bytearray(16))  # Bytearrays are mutable, so this should be fast when a register is updated
        self.i = 0  # Index register

        # Initialise timers
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer

        # Initialise program counter and current opcode
        self.pc = PROGRAM_LOCATION
        self.debug_pc = PROGRAM_LOCATION
        self.current = Opcode(0)

    def reset(self):
        self.stack.clear()
        self.v[:] = bytes(16)
        self.i = 0
        self.dt = 0
        self.st = 0
        self.pc = PROGRAM_LOCATION
        self.debug_pc = PROGRAM_LOCATION
        self.current = Opcode(0)

    def run(self, memory, cycles):
        for _ in range(cycles):
            self.fetch(memory)
            self.exec(memory)

    def fetch(self, memory):
        # Keep track of the program counter before altering it for debugging purposes
        self.debug_pc = self.pc

        try:
            self.current = Opcode.read(memory.ram.read_block(self.pc, 2))
        except DecodeError as err:
            raise DecodeError("{} at address 0x{:03x}".format(err, self.pc)) from None

        self.pc += 2  # Program counter updates after fetch, but before execute

    def exec(self, memory):
        self.dispatcher.execute(self, memory, self.current)

    def tick(self):
        # Called at 60Hz by the driver.  Neither timer goes below zero.
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

    def skip(self):
        self.pc += 2

    def debug(self, instruction):
        self.debugger.output(self, instruction)
