"""Raw-byte key decoding tests over a pipe."""

from __future__ import annotations

import os
import unittest

from lazytree import input as input_mod
from lazytree.keymap import KeyMap


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [input_mod.read_key(self.read_fd, timeout_ms=20) for _ in range(count)]

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(input_mod.read_key(self.read_fd, timeout_ms=0), "")

    def test_arrow_and_home_end_sequences(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[A\x1b[B\x1bOC\x1b[D\x1b[H\x1b[F", 6),
            ["UP", "DOWN", "RIGHT", "LEFT", "HOME", "END"],
        )

    def test_tilde_sequences(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[5~\x1b[6~\x1b[1~\x1b[4~", 4),
            ["PAGE_UP", "PAGE_DOWN", "HOME", "END"],
        )

    def test_modified_arrows_are_consumed_whole(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[1;5A\x1b[1;2Bj", 3),
            ["CTRL_UP", "SHIFT_DOWN", "j"],
        )

    def test_modified_tilde_and_unmodified_parameter(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[5;5~\x1b[1;1C\x1b[1;5Zk", 3),
            ["CTRL_PAGE_UP", "RIGHT", ""],
        )
        self.assertEqual(input_mod.read_key(self.read_fd, timeout_ms=20), "k")

    def test_modified_keys_do_not_quit(self) -> None:
        keymap = KeyMap()
        key = self._keys(b"\x1b[1;5A", 1)[0]
        self.assertFalse(keymap.is_quit(key))
        self.assertIsNone(keymap.event_for(key))
        self.assertEqual(input_mod.read_key(self.read_fd, timeout_ms=0), "")

    def test_control_keys(self) -> None:
        self.assertEqual(
            self._keys(b"\x03\x04\x15\r\n\t", 6),
            ["CTRL_C", "CTRL_D", "CTRL_U", "ENTER", "ENTER", "TAB"],
        )

    def test_lone_escape_keeps_following_key(self) -> None:
        self.assertEqual(self._keys(b"\x1bj", 2), ["ESC", "j"])

    def test_multibyte_character_is_one_token(self) -> None:
        self.assertEqual(self._keys("é".encode("utf-8"), 1), ["é"])


if __name__ == "__main__":
    unittest.main()
