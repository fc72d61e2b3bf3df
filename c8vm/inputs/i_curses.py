#!/usr/bin/env python3

"""
Curses TTY Terminal Input Plugin

A terminal only delivers characters, never separate press and release events.
A reader thread forwards each mapped character to the emulator, and the
matching CHIP-8 key is treated as held for KEYBOARD_FAKE_KEYDOWN_TIME after it
was last seen.  Keyboard auto-repeat keeps a key held for as long as it is
physically down.

ESC (char 27) or CTRL+C (char 3) ends the session.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import queue
from threading import Event, Thread
from time import time
from .i_null import Inputs as InputsBase
from ..constants import NUM_KEYS

KEYBOARD_FAKE_KEYDOWN_TIME = 0.2
QUIT_CHARS = (27, 3)


def read_terminal(stop_event, key_queue, keymap_dict, curses_screen):
    # getch blocks, so a stop request is only noticed after the next character
    while not stop_event.is_set():
        char = ord(chr(curses_screen.getch()).lower())

        if char in QUIT_CHARS:
            key_queue.put(None)
            return

        hex_key = keymap_dict.get(char)

        if hex_key is None:
            continue

        try:
            key_queue.put(hex_key, block=False)
        except queue.Full:
            pass  # The emulator is behind, so this repeat is dropped


class Inputs(InputsBase):
    def __init__(self, keymap, renderer):
        super().__init__(keymap, renderer, force_lowercase=True)

        self.held_until = [0.0] * NUM_KEYS
        self.stop_event = Event()
        self.key_queue = queue.Queue(NUM_KEYS)
        self.reader = Thread(
            target=read_terminal,
            args=(self.stop_event, self.key_queue, self.keymap_dict, renderer.get_curses_screen()),
            daemon=True
        )
        self.reader.start()

    def process_messages(self):
        release_time = time() + KEYBOARD_FAKE_KEYDOWN_TIME

        while True:
            try:
                hex_key = self.key_queue.get(block=False)
            except queue.Empty:
                return False

            if hex_key is None:
                return True

            self.held_until[hex_key] = release_time

    def is_key_down(self, key):
        return self.held_until[key] > time()

    def shutdown(self):
        # The daemon reader may still be blocked in getch, so it is not joined
        self.stop_event.set()
