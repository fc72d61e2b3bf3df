#!/usr/bin/env python3

"""
Machine Memory

Groups together everything the CPU reads and writes outside of its own
registers:

    * ram   - 4KB of RAM.  The hexadecimal system font sits at 0x000 and
              programs are loaded at 0x200
    * video - the 64x32 framebuffer
    * keys  - 16 booleans, one per logical key (0-F), written only by the
              host input plugin

The CPU only ever reads the keys.  The display only ever reads the video.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import FONT_LOCATION, NUM_KEYS, PROGRAM_LOCATION, RAM_SIZE, SYSTEM_FONT
from .framebuffer import Framebuffer
from .ram import RAM, RAMError


class Memory:
    def __init__(self):
        self.ram = RAM(RAM_SIZE)
        self.framebuffer = Framebuffer()
        self.keys = [False] * NUM_KEYS
        self.ram.write_block(FONT_LOCATION, SYSTEM_FONT)

    @property
    def video(self):
        return self.framebuffer.pixels

    def load_program(self, program):
        # Reject oversized programs before anything is written, rather than clipping them
        max_size = self.ram.mem_size - PROGRAM_LOCATION

        if len(program) > max_size:
            raise RAMError(
                "Program is {} bytes, but only {} bytes are available from 0x{:03x}".format(
                    len(program), max_size, PROGRAM_LOCATION
                )
            )

        self.ram.write_block(PROGRAM_LOCATION, program)

    def reset(self):
        self.ram.write_block(FONT_LOCATION, SYSTEM_FONT)
        self.framebuffer.clear()

        for key in range(NUM_KEYS):
            self.keys[key] = False

    def any_key_down(self):
        # Returns the lowest-numbered key held, or None
        for key, down in enumerate(self.keys):
            if down:
                return key

        return None
