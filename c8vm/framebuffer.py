#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are only drawn to the actual display (the host
rendering system) at 60Hz by the machine driver.  The framebuffer never talks
to a renderer itself, so the CPU can be run and tested with no display at all.

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen using an XOR method against a single plane of
64x32 pixels, stored row-major as booleans.

Collisions (where any pixel was set, but was unset by an XOR) are reported to
the caller, which folds them into the Vf flag.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.pixels = [False] * self.vid_size

    def clear(self):
        # Update in-place, as the renderer may be holding a reference to the list
        pixels = self.pixels

        for vram_loc in range(self.vid_size):
            pixels[vram_loc] = False

    def xor_pixel(self, x, y):
        # Returns True if a set pixel was erased.  Both axes wrap around the screen edges.
        vram_loc = (y % self.vid_height) * self.vid_width + (x % self.vid_width)
        collision = self.pixels[vram_loc]
        self.pixels[vram_loc] = not collision
        return collision

    def get_pixel(self, x, y):
        return self.pixels[y * self.vid_width + x]

    def get_vid_size(self):
        return self.vid_width, self.vid_height
