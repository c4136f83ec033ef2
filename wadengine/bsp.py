"""Binary space partition data of a level and a front-to-back traversal."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from dataclasses import dataclass, field

from wadengine.wad import WadFile

_NODE = struct.Struct("<12h2H")
_SUBSECTOR = struct.Struct("<HH")
_SEG = struct.Struct("<6H")

_SEGS_OFFSET = 5
_SSECTORS_OFFSET = 6
_NODES_OFFSET = 7

SUBSECTOR_FLAG = 0x8000
_SUBSECTOR_MASK = 0x7FFF
_VIEW_DISTANCE = 1000.0


@dataclass(frozen=True)
class BspNode:
    """A partition line with the bounding boxes and children of both sides."""

    x: int
    y: int
    dx: int
    dy: int
    bbox_right: tuple[int, int, int, int]
    bbox_left: tuple[int, int, int, int]
    right_child: int
    left_child: int


@dataclass(frozen=True)
class Subsector:
    seg_count: int
    first_seg: int


@dataclass(frozen=True)
class Seg:
    start_vertex: int
    end_vertex: int
    angle: int
    linedef: int
    direction: int
    offset: int


def _records(data: bytes, layout: struct.Struct, kind: str):
    if len(data) % layout.size:
        raise ValueError(
            f"{kind} lump of {len(data)} bytes is not a whole number of "
            f"{layout.size}-byte records"
        )
    return layout.iter_unpack(data)


def parse_nodes(data: bytes) -> list[BspNode]:
    return [
        BspNode(
            x=fields[0],
            y=fields[1],
            dx=fields[2],
            dy=fields[3],
            bbox_right=tuple(fields[4:8]),
            bbox_left=tuple(fields[8:12]),
            right_child=fields[12],
            left_child=fields[13],
        )
        for fields in _records(data, _NODE, "NODES")
    ]


def parse_subsectors(data: bytes) -> list[Subsector]:
    return [Subsector(*fields) for fields in _records(data, _SUBSECTOR, "SSECTORS")]


def parse_segs(data: bytes) -> list[Seg]:
    return [Seg(*fields) for fields in _records(data, _SEG, "SEGS")]


def _point_on_side(x: float, y: float, node: BspNode) -> int:
    cross_product = (x - node.x) * node.dy - (y - node.y) * node.dx
    return 1 if cross_product > 0.0 else -1


def _bbox_visible(player_x: float, player_y: float, bbox: tuple[int, ...]) -> bool:
    return math.hypot(bbox[2] - player_x, bbox[3] - player_y) < _VIEW_DISTANCE


@dataclass
class BspTree:
    """The nodes, subsectors and segs of one level."""

    nodes: list[BspNode] = field(default_factory=list)
    subsectors: list[Subsector] = field(default_factory=list)
    segs: list[Seg] = field(default_factory=list)

    @classmethod
    def load_from_wad(cls, wad: WadFile, map_name: str) -> BspTree:
        """Load the tree of the level whose marker lump is named map_name."""
        lumps = wad.lumps
        index = next(
            (i for i, lump in enumerate(lumps) if lump.name == map_name), None
        )
        if index is None:
            raise LookupError(f"Map not found: {map_name}")
        if index + _NODES_OFFSET >= len(lumps):
            raise LookupError(f"Map {map_name} is missing some of its lumps")

        return cls(
            nodes=parse_nodes(lumps[index + _NODES_OFFSET].data),
            subsectors=parse_subsectors(lumps[index + _SSECTORS_OFFSET].data),
            segs=parse_segs(lumps[index + _SEGS_OFFSET].data),
        )

    def traverse_bsp(
        self, player_x: float, player_y: float, node_index: int
    ) -> list[int]:
        """Return subsector numbers reachable from node_index, nearest side first."""
        return list(self._walk(player_x, player_y, node_index))

    def _walk(self, player_x: float, player_y: float, node_index: int) -> Iterator[int]:
        if node_index & SUBSECTOR_FLAG:
            yield node_index & _SUBSECTOR_MASK
            return
        if not 0 <= node_index < len(self.nodes):
            raise IndexError(f"BSP node {node_index} does not exist")

        node = self.nodes[node_index]
        if _point_on_side(player_x, player_y, node) <= 0:
            near, far, far_bbox = node.left_child, node.right_child, node.bbox_right
        else:
            near, far, far_bbox = node.right_child, node.left_child, node.bbox_left

        yield from self._walk(player_x, player_y, near)
        if _bbox_visible(player_x, player_y, far_bbox):
            yield from self._walk(player_x, player_y, far)