#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from c8vm import main
from c8vm.constants import APP_NAME
from c8vm.opcode import DecodeError
from c8vm.ram import RAMError
from chip8vm import parse_args


class TestStartup(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write_rom(self, data):
        filename = os.path.join(self.tmp_dir.name, "test.ch8")

        with open(filename, "wb") as f:
            f.write(data)

        return filename

    def _args(self, filename, *extra):
        return vars(parse_args([filename, "-r", "null"] + list(extra)))

    def test_parse_args_defaults(self):
        args = self._args("game.ch8")
        self.assertEqual("game.ch8", args["filename"])
        self.assertEqual(540, args["clock_speed"])
        self.assertEqual("null", args["renderer"])
        self.assertIsNone(args["frames"])
        self.assertFalse(args["debug"])

    def test_main_runs_rom(self):
        args = self._args(self._write_rom(b"\x12\x00"), "--frames", "2")
        output = io.StringIO()

        with redirect_stdout(output):
            main(args)

        self.assertIn(APP_NAME, output.getvalue())

    def test_main_debug_trace(self):
        args = self._args(self._write_rom(b"\x12\x00"), "--frames", "1", "-c", "120", "-d")
        output = io.StringIO()

        with redirect_stdout(output):
            main(args)

        self.assertEqual(2, output.getvalue().count("JUMP 0x200"))

    def test_main_rom_too_big(self):
        args = self._args(self._write_rom(b"\x00" * 0x1000), "--frames", "1")

        with redirect_stdout(io.StringIO()):
            self.assertRaises(RAMError, main, args)

    def test_main_bad_instruction(self):
        args = self._args(self._write_rom(b"\xFF\xFF"), "--frames", "1")

        with redirect_stdout(io.StringIO()):
            self.assertRaises(DecodeError, main, args)
