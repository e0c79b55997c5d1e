"""Small string helpers: ASCII case changes and a reusable string holder."""

from __future__ import annotations

import string
from typing import Optional

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def up_case(text: str) -> str:
    """``text`` with its ASCII letters made uppercase."""
    return text.translate(_TO_UPPER)


def lwr_case(text: str) -> str:
    """``text`` with its ASCII letters made lowercase."""
    return text.translate(_TO_LOWER)


class TempStr:
    """Holds a private copy of a string that can be replaced at will."""

    def __init__(self, text: Optional[str] = None) -> None:
        self.text: Optional[str] = None
        if text is not None:
            self.set_str(text)

    def set_str(self, text: Optional[str]) -> None:
        """Replace the held string; None empties the holder."""
        self.text = None if text is None else str(text)

    def __len__(self) -> int:
        return len(self.text) if self.text is not None else 0

    def __str__(self) -> str:
        return self.text if self.text is not None else ""