"""Run-length encoding in three output-equivalent strategies.

Each maximal run of one character becomes the character followed by the
run length, omitted when the run length is 1::

    "aaabccc" -> "a3bc3"

INVARIANT: All strategies return identical output for the same input,
including the empty string, newlines, digits and regex metacharacters.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from numkit.domain.types import CompressStrategy

_RUN_PATTERN = re.compile(r"(.)\1*", re.DOTALL)


def _encode_run(character: str, length: int) -> str:
    return character if length == 1 else f"{character}{length}"


def compress_matching(text: str) -> str:
    """Full regex solution: the lone capture group is the run character."""
    return _RUN_PATTERN.sub(lambda m: _encode_run(m.group(1), len(m.group(0))), text)


def compress_lookahead(text: str) -> str:
    """Single pass comparing each character with the one after it."""
    parts: list[str] = []
    run = 0
    for index, current in enumerate(text):
        run += 1
        following = text[index + 1] if index + 1 < len(text) else None
        if current != following:
            parts.append(_encode_run(current, run))
            run = 0
    return "".join(parts)


def scan_repeated(character: str, text: str, pos: int = 0) -> int:
    """Length of the run of *character* starting at *pos* in *text*.

    Examples:
        >>> scan_repeated("a", "aaab")
        3
        >>> scan_repeated("a", "abb")
        1
        >>> scan_repeated("a", "b")
        0
    """
    window = text[pos:]
    return len(window) - len(window.lstrip(character))


def compress_scanning(text: str) -> str:
    """Windowed scan: measure each run from its first index, then jump past it."""
    parts: list[str] = []
    index = 0
    while index < len(text):
        character = text[index]
        run = scan_repeated(character, text, index)
        parts.append(_encode_run(character, run))
        index += run
    return "".join(parts)


STRATEGIES: dict[CompressStrategy, Callable[[str], str]] = {
    CompressStrategy.MATCHING: compress_matching,
    CompressStrategy.LOOKAHEAD: compress_lookahead,
    CompressStrategy.SCANNING: compress_scanning,
}
