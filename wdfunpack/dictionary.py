"""A dictionary of path fragments with guessing parameters, kept in a text file."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

DEFAULT_DEPTH = 3
DEFAULT_TRIES = 500
DEFAULT_EXTS = ("png", "dds", "bmp")
DEFAULT_SAMPLE_FORMATS = (
    "xxx.xxx",
    "xxx/xxx.xxx",
    "xxx/xxx/xxx.xxx",
    "xxx/xxx/xxx/xxx.xxx",
    "xxx/xxx/xxx/xxx/xxx.xxx",
    "xxx/xxx/xxx/xxx/xxx/xxx.xxx",
)
MAX_SAMPLE_FORMATS = 6

_FRAGMENT_SEPARATORS = re.compile(r"[\\/._-]")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class DictionaryManager:
    """Path fragments, search parameters and sample name formats."""

    def __init__(self) -> None:
        self.fragments: set[str] = set()
        self.depth = DEFAULT_DEPTH
        self.tries = DEFAULT_TRIES
        self.exts: list[str] = list(DEFAULT_EXTS)
        self.sample_formats: list[str] = []

    def load(self, filename: str | Path) -> bool:
        """Load from a file; return False, with default samples, if it cannot be opened."""
        self.fragments.clear()
        self.sample_formats.clear()
        try:
            with open(filename, encoding="utf-8") as fh:
                text = fh.read()
        except OSError:
            self.sample_formats.extend(DEFAULT_SAMPLE_FORMATS)
            return False

        lines = iter(_split_lines(text))
        first = next(lines, None)
        if first is not None:
            self.parse_params_line(first)

        for _ in range(MAX_SAMPLE_FORMATS):
            line = next(lines, None)
            if line is None or not line or "xxx" not in line:
                break
            self.sample_formats.append(line)

        if not self.sample_formats:
            self.sample_formats.extend(DEFAULT_SAMPLE_FORMATS)

        self.fragments.update(line for line in lines if line and not line.startswith("#"))
        return True

    def save(self, filename: str | Path) -> None:
        """Write parameters, sample formats and sorted fragments to a file."""
        if not self.sample_formats:
            self.sample_formats.extend(DEFAULT_SAMPLE_FORMATS)
        with open(filename, "w", encoding="utf-8") as fh:
            fh.write(self.make_params_line() + "\n")
            for sample in self.sample_formats:
                fh.write(sample + "\n")
            for fragment in sorted(self.fragments):
                fh.write(fragment + "\n")

    def add_path_fragments(self, path: str) -> None:
        """Split a path on '\\', '/', '.', '-' and '_' and keep the non-empty pieces."""
        self.fragments.update(piece for piece in _FRAGMENT_SEPARATORS.split(path) if piece)

    def merge_fragments(self, fragments: Iterable[str]) -> None:
        self.fragments.update(fragments)

    def set_params(self, depth: int, tries: int, exts: Iterable[str]) -> None:
        self.depth = depth
        self.tries = tries
        self.exts = list(exts)

    def parse_params_line(self, line: str) -> None:
        """Read ``depth=..;tries=..;exts=a,b`` settings, defaulting what is missing."""
        self.depth = DEFAULT_DEPTH
        self.tries = DEFAULT_TRIES
        self.exts = []
        for token in line.split(";"):
            key, sep, value = token.partition("=")
            if not sep:
                continue
            if key == "depth":
                self.depth = _to_int(value)
            elif key == "tries":
                self.tries = _to_int(value)
            elif key == "exts":
                self.exts.extend(ext for ext in value.split(",") if ext)
        if not self.exts:
            self.exts = list(DEFAULT_EXTS)

    def make_params_line(self) -> str:
        return f"depth={self.depth};tries={self.tries};exts={','.join(self.exts)}"