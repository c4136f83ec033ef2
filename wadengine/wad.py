"""Reading of WAD archives: a header, a lump directory and the lump data."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO

_SIGNATURES = (b"IWAD", b"PWAD")
_HEADER = struct.Struct("<II")
_DIRECTORY_ENTRY = struct.Struct("<II8s")


class WadError(Exception):
    """Raised when a WAD archive cannot be read."""


class InvalidSignatureError(WadError):
    """Raised when the archive does not start with IWAD or PWAD."""

    def __init__(self) -> None:
        super().__init__("Invalid WAD signature")


@dataclass
class WadLump:
    """A named block of data stored in a WAD archive."""

    name: str
    data: bytes


def _read_exact(reader: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = reader.read(remaining)
        if not chunk:
            raise WadError("IO error: failed to fill whole buffer")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _decode_name(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").rstrip("\0")


@dataclass
class WadFile:
    """The lumps of a WAD archive in directory order."""

    lumps: list[WadLump] = field(default_factory=list)

    @classmethod
    def load(cls, reader: BinaryIO) -> WadFile:
        """Read a whole archive from a seekable binary stream."""
        signature = _read_exact(reader, 4)
        if signature not in _SIGNATURES:
            raise InvalidSignatureError()

        num_lumps, dir_offset = _HEADER.unpack(_read_exact(reader, _HEADER.size))

        try:
            reader.seek(dir_offset)
            lumps = []
            for _ in range(num_lumps):
                entry = _read_exact(reader, _DIRECTORY_ENTRY.size)
                lump_offset, lump_size, raw_name = _DIRECTORY_ENTRY.unpack(entry)
                directory_position = reader.tell()
                reader.seek(lump_offset)
                data = _read_exact(reader, lump_size)
                reader.seek(directory_position)
                lumps.append(WadLump(_decode_name(raw_name), data))
        except OSError as exc:
            raise WadError(f"IO error: {exc}") from exc

        return cls(lumps)

    def find_lump(self, name: str) -> WadLump | None:
        """Return the first lump with the given name, or None."""
        return next((lump for lump in self.lumps if lump.name == name), None)