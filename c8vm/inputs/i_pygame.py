#!/usr/bin/env python3

"""
PyGame Input Plugin

PyGame reports real key press and release events, so the held state of each
CHIP-8 key is tracked exactly.  The event queue is drained once per frame.

Closing the window or releasing ESC ends the session.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase
from ..constants import NUM_KEYS


class Inputs(InputsBase):
    def __init__(self, keymap, renderer):
        super().__init__(keymap, renderer)
        self.held = [False] * NUM_KEYS

    def process_messages(self):
        quit_requested = False

        # Drain the whole queue, so key states are current even when quitting
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN:
                self._set_held(event.key, True)
            elif event.type == pygame.KEYUP:
                if event.key == pygame.K_ESCAPE:
                    quit_requested = True
                else:
                    self._set_held(event.key, False)

        return quit_requested

    def _set_held(self, scancode, down):
        hex_key = self.keymap_dict.get(scancode)

        if hex_key is not None:
            self.held[hex_key] = down

    def is_key_down(self, key):
        return self.held[key]
