"""Map geometry read from the lumps that follow a map marker in a WAD."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from wadengine.wad import WadFile

_VERTEX = struct.Struct("<hh")
_LINEDEF = struct.Struct("<HHHHHHH")
_SIDEDEF = struct.Struct("<hh8s8s8sH")
_SECTOR = struct.Struct("<hh8s8shHH")
_THING = struct.Struct("<hhHHH")

_THINGS_OFFSET = 1
_LINEDEFS_OFFSET = 2
_SIDEDEFS_OFFSET = 3
_VERTEXES_OFFSET = 4
_SECTORS_OFFSET = 8


@dataclass(frozen=True)
class Vertex:
    x: int
    y: int


@dataclass(frozen=True)
class Linedef:
    start_vertex: int
    end_vertex: int
    flags: int
    special_type: int
    sector_tag: int
    front_sidedef: int
    back_sidedef: int


@dataclass(frozen=True)
class Sidedef:
    x_offset: int
    y_offset: int
    upper_texture: str
    lower_texture: str
    middle_texture: str
    sector: int


@dataclass(frozen=True)
class Sector:
    floor_height: int
    ceiling_height: int
    floor_texture: str
    ceiling_texture: str
    light_level: int
    special_type: int
    tag: int


@dataclass(frozen=True)
class Thing:
    x: int
    y: int
    angle: int
    thing_type: int
    flags: int


def _decode_name(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").rstrip("\0")


def _records(data: bytes, layout: struct.Struct, kind: str):
    if len(data) % layout.size:
        raise ValueError(
            f"{kind} lump of {len(data)} bytes is not a whole number of "
            f"{layout.size}-byte records"
        )
    return layout.iter_unpack(data)


def parse_vertices(data: bytes) -> list[Vertex]:
    return [Vertex(x, y) for x, y in _records(data, _VERTEX, "VERTEXES")]


def parse_linedefs(data: bytes) -> list[Linedef]:
    return [Linedef(*fields) for fields in _records(data, _LINEDEF, "LINEDEFS")]


def parse_sidedefs(data: bytes) -> list[Sidedef]:
    return [
        Sidedef(
            x_offset,
            y_offset,
            _decode_name(upper),
            _decode_name(lower),
            _decode_name(middle),
            sector,
        )
        for x_offset, y_offset, upper, lower, middle, sector in _records(
            data, _SIDEDEF, "SIDEDEFS"
        )
    ]


def parse_sectors(data: bytes) -> list[Sector]:
    return [
        Sector(
            floor_height,
            ceiling_height,
            _decode_name(floor),
            _decode_name(ceiling),
            light_level,
            special_type,
            tag,
        )
        for floor_height, ceiling_height, floor, ceiling, light_level, special_type, tag in _records(
            data, _SECTOR, "SECTORS"
        )
    ]


def parse_things(data: bytes) -> list[Thing]:
    return [Thing(*fields) for fields in _records(data, _THING, "THINGS")]


@dataclass
class Map:
    """The vertices, lines, sides, sectors and things of one level."""

    vertices: list[Vertex] = field(default_factory=list)
    linedefs: list[Linedef] = field(default_factory=list)
    sidedefs: list[Sidedef] = field(default_factory=list)
    sectors: list[Sector] = field(default_factory=list)
    things: list[Thing] = field(default_factory=list)

    @classmethod
    def load_from_wad(cls, wad: WadFile, map_name: str) -> Map:
        """Load the level whose marker lump is named map_name."""
        lumps = wad.lumps
        index = next(
            (i for i, lump in enumerate(lumps) if lump.name == map_name), None
        )
        if index is None:
            raise LookupError(f"Map not found: {map_name}")
        if index + _SECTORS_OFFSET >= len(lumps):
            raise LookupError(f"Map {map_name} is missing some of its lumps")

        def lump_data(offset: int) -> bytes:
            return lumps[index + offset].data

        return cls(
            vertices=parse_vertices(lump_data(_VERTEXES_OFFSET)),
            linedefs=parse_linedefs(lump_data(_LINEDEFS_OFFSET)),
            sidedefs=parse_sidedefs(lump_data(_SIDEDEFS_OFFSET)),
            sectors=parse_sectors(lump_data(_SECTORS_OFFSET)),
            things=parse_things(lump_data(_THINGS_OFFSET)),
        )