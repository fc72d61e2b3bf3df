#!/usr/bin/env python3

"""
CPU Debugger

Formats the machine state as a single line, in this order:
    * V  - the 16 registers as one hex string, vF first and v0 last
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Address the current instruction was fetched from
    * OP - Raw opcode
    * IN - Mnemonic of the instruction

Live tracing is chosen when the CPU is built and prints one line per
instruction.  Faults use the verbose form, which appends the stack.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Debugger:
    def __init__(self, live=False):
        self.live = live

    def debug(self, cpu, instruction, verbose=False):
        state = "V: 0x{} I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}".format(
            bytes(reversed(cpu.v)).hex(), cpu.i, cpu.dt, cpu.st, cpu.debug_pc, cpu.current, instruction
        )

        if not verbose:
            return state

        stack_items = cpu.stack.get_items()

        if not stack_items:
            return state + "\nStack: (Empty)"

        return state + "\nStack: " + " ".join("0x{:03x}".format(addr) for addr in stack_items)

    def is_live(self):
        return self.live

    def output(self, cpu, instruction):
        print(self.debug(cpu, instruction))
