#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws the framebuffer in a standard Linux-style TTY Terminal, the Windows
Command Prompt, or PowerShell.  Each pixel is an inverted space, stretched
horizontally by the scale so the screen keeps roughly the right shape.

The top line of the terminal is used for the title and performance report.
Only pixels which changed since the last frame are redrawn.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import _curses
from .r_null import Renderer as RendererBase


class Renderer(RendererBase):
    def __init__(self, scale=None, curses_cursor_mode=0, **kwargs):
        if scale is None:
            scale = 2  # Default horizontal stretch if not supplied, or set to default

        self.pixel_char = " " * scale
        self.pad = None
        self.last_pixels = None
        self.last_screen_height = -1
        self.last_screen_width = -1
        self.refresh_needed = False
        self.cursor_mode = curses_cursor_mode
        self.screen = curses.initscr()
        curses.curs_set(self.cursor_mode)
        curses.noecho()
        curses.cbreak()
        super().__init__(scale)

    def set_resolution(self, width, height):
        adjusted_width = width * self.scale + 1

        # We have to allow one extra character, presumably for the cursor, otherwise we can't write the furthest
        # bottom-right pixel.  The extra row at the top holds the title.
        self.pad = curses.newpad(height + 1, adjusted_width)
        self.last_pixels = None
        super().set_resolution(width, height)

    def update_screen(self, pixels):
        last_pixels = self.last_pixels
        width = self.width

        for location, pixel in enumerate(pixels):
            if last_pixels is None or last_pixels[location] != pixel:
                y, x = divmod(location, width)
                self.pad.addstr(y + 1, x * self.scale, self.pixel_char, curses.A_REVERSE if pixel else curses.A_NORMAL)
                self.refresh_needed = True

        # Keep a copy, as the framebuffer's list is updated in-place
        self.last_pixels = list(pixels)
        self._refresh_display()
        super().update_screen(pixels)

    def _refresh_display(self):
        screen_height, screen_width = self.screen.getmaxyx()  # This doesn't seem to ever change/work on Windows?!

        if screen_height == self.last_screen_height and screen_width == self.last_screen_width:
            # Fast delta update
            if self.refresh_needed:
                self.pad.refresh(0, 0, 0, 0, screen_height - 1, screen_width - 1)
                self.refresh_needed = False
        else:
            # Screen resolution changed, redraw everything
            self.screen.clear()

            if hasattr(curses, "resizeterm"):
                # This doesn't work on Windows
                curses.resizeterm(screen_height, screen_width)

            self.screen.refresh()
            self.last_screen_height = screen_height
            self.last_screen_width = screen_width
            self.refresh_needed = True

    def set_title(self, title):
        if self.pad:
            title_len = len(title)
            line_len = self.width * self.scale

            if line_len > title_len:
                self.pad.addstr(0, 0, title + " " * (line_len - title_len), curses.A_REVERSE)
                self.refresh_needed = True

        super().set_title(title)

    def shutdown(self):
        curses.nocbreak()
        curses.echo()

        if self.cursor_mode != 1:
            try:
                curses.curs_set(1)
            except _curses.error:
                pass

        curses.endwin()
        super().shutdown()

    # No Superclass for this Curses-specific method

    def get_curses_screen(self):
        return self.screen
