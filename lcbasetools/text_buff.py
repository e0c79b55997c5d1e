"""A ring buffer for streamed text, read back by character or by string."""

from __future__ import annotations

from collections import deque

NUL = "\0"


class TextBuff:
    """Holds up to ``num_bytes`` characters, oldest first.

    When full, adding a character either fails or, with ``overwrite``, drops
    the oldest character to make room. Strings stored with a trailing NUL can
    be read back one at a time with :meth:`read_str`.
    """

    def __init__(self, num_bytes: int, overwrite: bool = False) -> None:
        if num_bytes < 1:
            raise ValueError("num_bytes must be at least 1")
        self._size = num_bytes
        self._overwrite = overwrite
        self._chars: deque[str] = deque()

    def add_char(self, char: str) -> bool:
        """Store one character; False if the buffer is full and not overwriting."""
        if len(char) != 1:
            raise ValueError("add_char takes exactly one character")
        if self._overwrite and self.full():
            self.read_char()
        if self.full():
            return False
        self._chars.append(char)
        return True

    def add_str(self, text: str, and_null: bool = True) -> bool:
        """Store ``text`` up to any NUL in it, then a NUL if ``and_null``.

        Returns whether the last character offered was stored.
        """
        success = False
        for char in text.split(NUL, 1)[0]:
            success = self.add_char(char)
        if and_null:
            success = self.add_char(NUL)
        return success

    def peek_head(self) -> str:
        """The next character to be read, or NUL when empty."""
        return self._chars[0] if self._chars else NUL

    def peek_index(self, index: int) -> str:
        """The character ``index`` places from the head, or NUL if there is none."""
        if 0 <= index < len(self._chars):
            return self._chars[index]
        return NUL

    def read_char(self) -> str:
        """Remove and return the oldest character, or NUL when empty."""
        return self._chars.popleft() if self._chars else NUL

    def read_str(self) -> str:
        """Remove and return text up to and including the next NUL, without the NUL.

        With no NUL stored, everything is read out.
        """
        result = []
        while self._chars:
            char = self._chars.popleft()
            if char == NUL:
                break
            result.append(char)
        return "".join(result)

    def buff_size(self) -> int:
        """How many characters the buffer can hold."""
        return self._size

    def num_chars(self) -> int:
        """How many characters the buffer holds now."""
        return len(self._chars)

    def strlen(self) -> int:
        """Length of the string :meth:`read_str` would return next."""
        count = 0
        for char in self._chars:
            if char == NUL:
                break
            count += 1
        return count

    def empty(self) -> bool:
        return not self._chars

    def full(self) -> bool:
        return len(self._chars) >= self._size

    def clear(self) -> None:
        """Drop every stored character."""
        self._chars.clear()