#!/usr/bin/env python3

"""
Stack Emulator

There is no specified location for the CPU call stack in system RAM, and no
stack pointer (SP) register exposed to the running program.  This means we can
simply wrap a list to fully (and quickly) emulate it.

The hardware only had room for 16 return addresses.  Going past that, or
returning with nothing on the stack, halts the machine with its own error type
so the two cases can be told apart.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_SIZE


class StackError(Exception):
    pass


class StackOverflowError(StackError):
    pass


class StackUnderflowError(StackError):
    pass


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.items = []
        self.size = size

    def push(self, item):
        if len(self.items) >= self.size:
            raise StackOverflowError("Stack overflow")

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackUnderflowError("Stack underflow") from None

    def clear(self):
        self.items.clear()

    def get_items(self):
        # For debugging
        return self.items
