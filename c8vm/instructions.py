#!/usr/bin/env python3

"""
Instruction Dispatcher

Maps a decoded opcode onto one of the 35 instruction handlers and runs it
against a CPU and its Memory.  The instruction set is closed, so the whole
table is built once up front.  Lookups first use the top nibble (group), and
groups with sub-forms are looked up a second time with their sub-selector
masked in:

    0x0    - exact match on the whole opcode
    0x5/9  - bitmask 0xF00F
    0x8    - bitmask 0xF00F
    0xE/F  - bitmask 0xF0FF

Any opcode not in the table halts the machine with a DecodeError.

All register arithmetic wraps at 8 bits.  Where an instruction produces a
flag, Vf is written after the result, so the flag wins if Vf was also the
destination register.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, FONT_GLYPH_SIZE, FONT_LOCATION, NUM_KEYS
from .opcode import DecodeError


class InstructionDispatcher:
    def __init__(self):
        # Define instruction pointers.
        # n = Nibble
        # nn = Byte
        # nnn = address
        # x/y = register (0-15)
        self.instructions = {
            # Initial lookup for instructions' first nibble
            0x0: self._0nnn,  # Alias for bitmask 0xFFFF
            0x1: self._1nnn,
            0x2: self._2nnn,
            0x3: self._3xnn,
            0x4: self._4xnn,
            0x5: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0x6: self._6xnn,
            0x7: self._7xnn,
            0x8: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0x9: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0xA: self._Annn,
            0xB: self._Bnnn,
            0xC: self._Cxnn,
            0xD: self._Dxyn,
            0xE: self._Ennn_Fnnn,  # Alias for bitmask 0xF0FF
            0xF: self._Ennn_Fnnn,  # Alias for bitmask 0xF0FF
            # Instructions beginning with nibble 0x0, bitmask 0xFFFF (i.e., exact match)
            0x00E0: self._00E0,
            0x00EE: self._00EE,
            # Instructions beginning with nibble 0x5/0x8/0x9, bitmask 0xF00F
            0x5000: self._5xy0,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            0x9000: self._9xy0,
            # Instructions beginning with nibble 0xE/0xF, bitmask 0xF0FF
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

    def execute(self, cpu, memory, op):
        self._call_masked_instruction(cpu, memory, op, op.group)

    def _call_masked_instruction(self, cpu, memory, op, masked_opcode):
        instruction = self.instructions.get(masked_opcode)

        if instruction is None:
            self._opcode_unsupported(cpu, op)

        instruction(cpu, memory, op)

    def _opcode_unsupported(self, cpu, op):
        raise DecodeError(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} at address 0x{:03x} is not a known instruction."
            ).format(
                APP_INTRO, cpu.debugger.debug(cpu, "???", verbose=True), op, cpu.debug_pc
            )
        ) from None

    def _0nnn(self, cpu, memory, op):
        if op < 0x10:
            # Opcodes 0x0 - 0xF are used internally for indexing by group, so they can't be looked up directly
            self._opcode_unsupported(cpu, op)

        self._call_masked_instruction(cpu, memory, op, int(op))

    def _5nnn_8nnn_9nnn(self, cpu, memory, op):
        self._call_masked_instruction(cpu, memory, op, op & 0xF00F)

    def _Ennn_Fnnn(self, cpu, memory, op):
        self._call_masked_instruction(cpu, memory, op, op & 0xF0FF)

    def _00E0(self, cpu, memory, op):  # CLR
        if cpu.live_debug:
            cpu.debug("CLR")

        memory.framebuffer.clear()

    def _00EE(self, cpu, memory, op):  # RTS
        if cpu.live_debug:
            cpu.debug("RTS")

        cpu.pc = cpu.stack.pop()

    def _1nnn(self, cpu, memory, op):  # JUMP addr
        if cpu.live_debug:
            cpu.debug("JUMP 0x{:03x}".format(op.nnn))

        cpu.pc = op.nnn

    def _2nnn(self, cpu, memory, op):  # CALL addr
        if cpu.live_debug:
            cpu.debug("CALL 0x{:03x}".format(op.nnn))

        cpu.stack.push(cpu.pc)
        cpu.pc = op.nnn

    def _3xnn(self, cpu, memory, op):  # SKE Vx, byte
        if cpu.live_debug:
            cpu.debug("SKE V{:01x}, 0x{:02x}".format(op.x, op.nn))

        if cpu.v[op.x] == op.nn:
            cpu.skip()

    def _4xnn(self, cpu, memory, op):  # SKNE Vx, byte
        if cpu.live_debug:
            cpu.debug("SKNE V{:01x}, 0x{:02x}".format(op.x, op.nn))

        if cpu.v[op.x] != op.nn:
            cpu.skip()

    def _5xy0(self, cpu, memory, op):  # SKRE Vx, Vy
        if cpu.live_debug:
            cpu.debug("SKRE V{:01x}, V{:01x}".format(op.x, op.y))

        if cpu.v[op.x] == cpu.v[op.y]:
            cpu.skip()

    def _6xnn(self, cpu, memory, op):  # LOAD Vx, byte
        if cpu.live_debug:
            cpu.debug("LOAD V{:01x}, 0x{:02x}".format(op.x, op.nn))

        cpu.v[op.x] = op.nn

    def _7xnn(self, cpu, memory, op):  # ADD Vx, byte
        vx = op.x

        if cpu.live_debug:
            cpu.debug("ADD V{:01x}, 0x{:02x}".format(vx, op.nn))

        # No carry flag for this one
        cpu.v[vx] = (cpu.v[vx] + op.nn) & 0xFF

    def _8xy0(self, cpu, memory, op):  # MOVE Vx, Vy
        if cpu.live_debug:
            cpu.debug("MOVE V{:01x}, V{:01x}".format(op.x, op.y))

        cpu.v[op.x] = cpu.v[op.y]

    def _8xy1(self, cpu, memory, op):  # OR Vx, Vy
        if cpu.live_debug:
            cpu.debug("OR V{:01x}, V{:01x}".format(op.x, op.y))

        cpu.v[op.x] |= cpu.v[op.y]

    def _8xy2(self, cpu, memory, op):  # AND Vx, Vy
        if cpu.live_debug:
            cpu.debug("AND V{:01x}, V{:01x}".format(op.x, op.y))

        cpu.v[op.x] &= cpu.v[op.y]

    def _8xy3(self, cpu, memory, op):  # XOR Vx, Vy
        if cpu.live_debug:
            cpu.debug("XOR V{:01x}, V{:01x}".format(op.x, op.y))

        cpu.v[op.x] ^= cpu.v[op.y]

    def _8xy4(self, cpu, memory, op):  # ADDR Vx, Vy
        vx = op.x
        vy = op.y

        if cpu.live_debug:
            cpu.debug("ADDR V{:01x}, V{:01x}".format(vx, vy))

        val = cpu.v[vx] + cpu.v[vy]
        cpu.v[vx] = val & 0xFF
        cpu.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, cpu, vx, val):  # Post-SUB/SUBN
        cpu.v[vx] = val & 0xFF
        # Vf is set when NOT borrowing
        cpu.v[0xF] = int(val >= 0)

    def _8xy5(self, cpu, memory, op):  # SUB Vx, Vy
        if cpu.live_debug:
            cpu.debug("SUB V{:01x}, V{:01x}".format(op.x, op.y))

        self._post_8xy5_8xy7(cpu, op.x, cpu.v[op.x] - cpu.v[op.y])

    def _8xy6(self, cpu, memory, op):  # SHR Vx
        vx = op.x

        if cpu.live_debug:
            cpu.debug("SHR V{:01x}".format(vx))

        # Vy is ignored
        val = cpu.v[vx]
        cpu.v[vx] = val >> 1
        cpu.v[0xF] = val & 1

    def _8xy7(self, cpu, memory, op):  # SUBN Vx, Vy
        if cpu.live_debug:
            cpu.debug("SUBN V{:01x}, V{:01x}".format(op.x, op.y))

        self._post_8xy5_8xy7(cpu, op.x, cpu.v[op.y] - cpu.v[op.x])

    def _8xyE(self, cpu, memory, op):  # SHL Vx
        vx = op.x

        if cpu.live_debug:
            cpu.debug("SHL V{:01x}".format(vx))

        val = cpu.v[vx]
        cpu.v[vx] = (val << 1) & 0xFF
        cpu.v[0xF] = val >> 7

    def _9xy0(self, cpu, memory, op):  # SKRNE Vx, Vy
        if cpu.live_debug:
            cpu.debug("SKRNE V{:01x}, V{:01x}".format(op.x, op.y))

        if cpu.v[op.x] != cpu.v[op.y]:
            cpu.skip()

    def _Annn(self, cpu, memory, op):  # LOADI addr
        if cpu.live_debug:
            cpu.debug("LOADI 0x{:03x}".format(op.nnn))

        cpu.i = op.nnn

    def _Bnnn(self, cpu, memory, op):  # JUMPI addr
        if cpu.live_debug:
            cpu.debug("JUMPI 0x{:03x}".format(op.nnn))

        # Not masked.  Landing past the end of RAM is caught by the next fetch.
        cpu.pc = cpu.v[0x0] + op.nnn

    def _Cxnn(self, cpu, memory, op):  # RAND Vx, byte
        if cpu.live_debug:
            cpu.debug("RAND V{:01x}, 0x{:02x}".format(op.x, op.nn))

        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        cpu.v[op.x] = cpu.rand() & op.nn

    def _Dxyn(self, cpu, memory, op):  # DRAW Vx, Vy, nibble
        # Main sprite drawing routine.  Sprites are always 8 pixels wide.
        height = op.n

        if cpu.live_debug:
            cpu.debug("DRAW V{:01x}, V{:01x}, 0x{:01x}".format(op.x, op.y, height))

        framebuffer = memory.framebuffer
        vid_width, vid_height = framebuffer.get_vid_size()
        # Take the position before Vf is cleared, in case Vf is one of the coordinates
        vx_pos = cpu.v[op.x] % vid_width
        vy_pos = cpu.v[op.y] % vid_height
        i = cpu.i
        cpu.v[0xF] = 0
        collided = False

        for y in range(height):
            spr_data = memory.ram.read(i + y)

            for x in range(8):
                if spr_data & (0x80 >> x):
                    # Don't stop drawing after a collision.  Every pixel still has to be flipped.
                    if framebuffer.xor_pixel(vx_pos + x, vy_pos + y):
                        collided = True

        cpu.v[0xF] = int(collided)

    def _Ex9E(self, cpu, memory, op):  # SKP Vx
        if cpu.live_debug:
            cpu.debug("SKP V{:01x}".format(op.x))

        if memory.keys[cpu.v[op.x] % NUM_KEYS]:
            cpu.skip()

    def _ExA1(self, cpu, memory, op):  # SKNP Vx
        if cpu.live_debug:
            cpu.debug("SKNP V{:01x}".format(op.x))

        if not memory.keys[cpu.v[op.x] % NUM_KEYS]:
            cpu.skip()

    def _Fx07(self, cpu, memory, op):  # MOVED Vx
        if cpu.live_debug:
            cpu.debug("MOVED V{:01x}".format(op.x))

        cpu.v[op.x] = cpu.dt

    def _Fx0A(self, cpu, memory, op):  # KEYD Vx
        if cpu.live_debug:
            cpu.debug("KEYD V{:01x}".format(op.x))

        # This opcode waits for a keypress, but since the timers still need to expire and the framebuffer still needs
        # updating, we'll return control to the driver and simply decrement the incremented program counter.
        key = memory.any_key_down()

        if key is None:
            cpu.pc -= 2
        else:
            cpu.v[op.x] = key

    def _Fx15(self, cpu, memory, op):  # LOADD Vx
        if cpu.live_debug:
            cpu.debug("LOADD V{:01x}".format(op.x))

        cpu.dt = cpu.v[op.x]

    def _Fx18(self, cpu, memory, op):  # LOADS Vx
        if cpu.live_debug:
            cpu.debug("LOADS V{:01x}".format(op.x))

        cpu.st = cpu.v[op.x]

    def _Fx1E(self, cpu, memory, op):  # ADDI Vx
        if cpu.live_debug:
            cpu.debug("ADDI V{:01x}".format(op.x))

        # Vf is left alone, even if I goes past the end of RAM
        cpu.i = (cpu.i + cpu.v[op.x]) & 0xFFFF

    def _Fx29(self, cpu, memory, op):  # LDSPR Vx
        if cpu.live_debug:
            cpu.debug("LDSPR V{:01x}".format(op.x))

        cpu.i = FONT_LOCATION + FONT_GLYPH_SIZE * cpu.v[op.x]

    def _Fx33(self, cpu, memory, op):  # BCD Vx
        if cpu.live_debug:
            cpu.debug("BCD V{:01x}".format(op.x))

        val = cpu.v[op.x]
        i = cpu.i
        memory.ram.write(i, val // 100)            # Most-significant digit
        memory.ram.write(i + 1, (val // 10) % 10)  # Middle digit
        memory.ram.write(i + 2, val % 10)          # Least-significant digit

    def _Fx55(self, cpu, memory, op):  # STOR Vx
        if cpu.live_debug:
            cpu.debug("STOR V{:01x}".format(op.x))

        i = cpu.i

        # Vx itself is NOT stored.  This is the opposite of READ, and is deliberate.
        for reg in range(op.x):
            memory.ram.write(i + reg, cpu.v[reg])

    def _Fx65(self, cpu, memory, op):  # READ Vx
        if cpu.live_debug:
            cpu.debug("READ V{:01x}".format(op.x))

        i = cpu.i

        # Ensure with +1 that the final register is copied
        for reg in range(op.x + 1):
            cpu.v[reg] = memory.ram.read(i + reg)
