"""Reading WDF archives and extracting entries by name."""

from __future__ import annotations

import logging
import re
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from .hashing import ANSI_ENCODING, adjust_name, string_id, to_bytes

WDF_MAGIC = 0x57444650
CHUNK_SIZE = 1024

_HEADER = struct.Struct("<IiI")
_ENTRY = struct.Struct("<4I")
_LINE_BREAK = re.compile(rb"[\r\n]")
_SEPARATORS = re.compile(r"[\\/]")

_log = logging.getLogger(__name__)


class WdfError(Exception):
    """Raised when an archive is missing, malformed or not open."""


@dataclass(frozen=True)
class IndexEntry:
    """One index record: name hash, data offset, data size and free space."""

    uid: int
    offset: int
    size: int
    space: int


@dataclass(frozen=True)
class ExtractResult:
    """Outcome of extracting a single entry."""

    ok: bool
    uid: int
    message: str


@dataclass
class BatchResult:
    """Outcome of extracting every entry named in a list file."""

    logs: list[str] = field(default_factory=list)
    success: int = 0
    fail: int = 0


class WDFUnpacker:
    """An open WDF archive whose entries can be extracted by name."""

    def __init__(self, wdf_path: str | Path | None = None) -> None:
        self._file: BinaryIO | None = None
        self._path: Path | None = None
        self._index: list[IndexEntry] = []
        if wdf_path is not None:
            self.open(wdf_path)

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def index(self) -> tuple[IndexEntry, ...]:
        return tuple(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __enter__(self) -> WDFUnpacker:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def open(self, wdf_path: str | Path) -> None:
        """Open an archive and load its index, closing any archive already open."""
        self.close()
        self._file = open(wdf_path, "rb")
        self._path = Path(wdf_path)
        try:
            self.load_index()
        except WdfError:
            self.close()
            raise

    def close(self) -> None:
        """Close the archive and forget its index."""
        if self._file is not None:
            self._file.close()
            self._file = None
        self._path = None
        self._index = []

    def load_index(self) -> None:
        """Read and check the header, then read the index table."""
        if self._file is None:
            raise WdfError("no archive is open")
        self._file.seek(0)
        header = self._file.read(_HEADER.size)
        if len(header) != _HEADER.size:
            raise WdfError("archive header is truncated")
        magic, number, offset = _HEADER.unpack(header)
        if magic != WDF_MAGIC:
            raise WdfError(f"bad archive signature 0x{magic:08X}")
        if number < 0:
            raise WdfError(f"bad entry count {number}")
        self._file.seek(offset)
        expected = _ENTRY.size * number
        raw = self._file.read(expected)
        if len(raw) != expected:
            raise WdfError("archive index is truncated")
        self._index = [IndexEntry(*fields) for fields in _ENTRY.iter_unpack(raw)]

    def _find(self, uid: int) -> IndexEntry | None:
        return next((entry for entry in self._index if entry.uid == uid), None)

    def extract_file(self, inner_name: str | bytes, out_path: str | Path) -> ExtractResult:
        """Copy the entry called ``inner_name`` to ``out_path``, creating parent folders."""
        if self._file is None:
            raise WdfError("no archive is open")
        raw = to_bytes(inner_name)
        display = raw.decode(ANSI_ENCODING, errors="replace")
        uid = string_id(adjust_name(raw))
        entry = self._find(uid)
        if entry is None:
            return ExtractResult(False, uid, f"[Not found] {display} (UID=0x{uid:08X})")

        target = Path(out_path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        try:
            dst = open(target, "wb")
        except OSError as exc:
            return ExtractResult(
                False, uid, f"[Write failed] {target} (UID=0x{uid:08X}) err={exc.errno or 0}"
            )

        with dst:
            self._file.seek(entry.offset)
            remaining = entry.size
            while remaining > 0:
                try:
                    chunk = self._file.read(min(remaining, CHUNK_SIZE))
                except OSError as exc:
                    return ExtractResult(
                        False,
                        uid,
                        f"[Read failed] {display} (UID=0x{uid:08X}) "
                        f"offset=0x{entry.offset:08X} err={exc.errno or 0}",
                    )
                if not chunk:
                    break
                try:
                    dst.write(chunk)
                except OSError as exc:
                    return ExtractResult(
                        False,
                        uid,
                        f"[Write failed] {target} (UID=0x{uid:08X}) err={exc.errno or 0}",
                    )
                remaining -= len(chunk)

        return ExtractResult(True, uid, f"[Extracted] {display} (UID=0x{uid:08X})")

    def extract_by_lst(self, lst_path: str | Path, out_dir: str | Path) -> BatchResult:
        """Extract every entry named in a list file, one name per line, under ``out_dir``."""
        data = Path(lst_path).read_bytes().split(b"\0", 1)[0]
        batch = BatchResult()
        for raw_line in _LINE_BREAK.split(data):
            inner = raw_line.lstrip(b" \t")
            if not inner:
                continue
            name = inner.decode(ANSI_ENCODING, errors="replace")
            parts = [part for part in _SEPARATORS.split(name) if part]
            result = self.extract_file(inner, Path(out_dir).joinpath(*parts))
            if result.ok:
                batch.success += 1
            else:
                batch.fail += 1
            _log.info("%s", result.message)
            batch.logs.append(result.message)
        return batch