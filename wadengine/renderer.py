"""Frame geometry, palettes and wall textures for the software renderer."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from wadengine.wad import WadFile

FIELD_OF_VIEW = math.pi / 3.0
MAX_VIEW_DISTANCE = 1000.0
_WALL_SCALE = 100.0
_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)

_COUNT = struct.Struct("<i")
_MAP_TEXTURE = struct.Struct("<8sIhhIh")
_MAP_PATCH = struct.Struct("<hhhhh")
_PICTURE_HEADER = struct.Struct("<HHhh")
_POST_END = 0xFF

Color = tuple[int, int, int]


class WallType(Enum):
    STONE = "stone"
    WOOD = "wood"
    METAL = "metal"


_WALL_COLORS: dict[WallType, Color] = {
    WallType.STONE: (128, 128, 128),
    WallType.WOOD: (139, 69, 19),
    WallType.METAL: (192, 192, 192),
}


@dataclass(frozen=True)
class RayHit:
    """Where a cast ray met a wall."""

    distance: float
    wall_type: WallType
    hit_x: float
    hit_y: float


@dataclass(frozen=True)
class WallSlice:
    """The screen rows of one wall column and the colour to fill them with."""

    top: int
    bottom: int
    color: Color

    @property
    def rows(self) -> range:
        return range(self.top, self.bottom)


@dataclass(frozen=True)
class Texture:
    """A wall texture as row-major palette indices."""

    width: int
    height: int
    pixels: bytes

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the texture")
        return self.pixels[y * self.width + x]


def _saturating_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def _halve_toward_zero(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def wall_color(wall_type: WallType) -> Color:
    """Return the flat colour a wall of this type is drawn with."""
    return _WALL_COLORS[wall_type]


def ray_angles(player_angle: float, screen_width: int) -> list[float]:
    """Return the angle of the ray cast for each screen column, left to right."""
    half_fov = FIELD_OF_VIEW / 2.0
    return [
        player_angle - half_fov + (x / screen_width) * FIELD_OF_VIEW
        for x in range(screen_width)
    ]


def wall_slice(screen_height: int, hit: RayHit) -> WallSlice:
    """Return the vertical span drawn for a wall hit, clipped to the screen."""
    if hit.distance == 0.0:
        scaled = math.inf
    else:
        scaled = screen_height / hit.distance * _WALL_SCALE
    wall_height = _saturating_i32(scaled)
    wall_top = _halve_toward_zero(screen_height - wall_height)
    wall_bottom = wall_top + wall_height
    return WallSlice(
        top=max(wall_top, 0),
        bottom=min(wall_bottom, screen_height),
        color=wall_color(hit.wall_type),
    )


def sprite_draw_order(
    sprite_positions: Sequence[tuple[float, float]], player_x: float, player_y: float
) -> list[int]:
    """Return sprite indices ordered farthest first; equal distances keep their order."""
    distances = [
        math.hypot(x - player_x, y - player_y) for x, y in sprite_positions
    ]
    if any(math.isnan(d) for d in distances):
        raise ValueError("sprite distance is not a number")
    return sorted(range(len(distances)), key=distances.__getitem__, reverse=True)


def sprite_screen_x(
    sprite_x: float,
    sprite_y: float,
    player_x: float,
    player_y: float,
    player_angle: float,
    screen_width: int,
) -> float | None:
    """Return the screen column of a sprite, or None when it falls off screen."""
    angle_to_sprite = math.atan2(sprite_y - player_y, sprite_x - player_x) - player_angle
    half_width = screen_width / 2.0
    screen_x = half_width + math.tan(angle_to_sprite) * half_width
    if 0.0 <= screen_x < screen_width:
        return screen_x
    return None


def load_palette(wad: WadFile) -> list[Color]:
    """Return the colours of the PLAYPAL lump; a trailing partial entry is dropped."""
    playpal = wad.find_lump("PLAYPAL")
    if playpal is None:
        raise LookupError("PLAYPAL lump not found")
    data = playpal.data
    return [
        (data[i], data[i + 1], data[i + 2]) for i in range(0, len(data) - 2, 3)
    ]


def _decode_name(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").rstrip("\0")


def _parse_patch_names(data: bytes) -> list[str]:
    try:
        (count,) = _COUNT.unpack_from(data, 0)
        if count < 0:
            raise ValueError("PNAMES has a negative patch count")
        raw = struct.unpack_from(f"<{count * 8}s", data, _COUNT.size)[0]
    except struct.error as exc:
        raise ValueError(f"PNAMES lump is truncated: {exc}") from exc
    return [_decode_name(raw[i : i + 8]).upper() for i in range(0, len(raw), 8)]


def _draw_patch(
    canvas: bytearray, width: int, height: int, picture: bytes, origin_x: int, origin_y: int
) -> None:
    patch_width, _, _, _ = _PICTURE_HEADER.unpack_from(picture, 0)
    column_offsets = struct.unpack_from(
        f"<{patch_width}I", picture, _PICTURE_HEADER.size
    )
    for column, position in enumerate(column_offsets):
        x = origin_x + column
        if not 0 <= x < width:
            continue
        while (top_delta := picture[position]) != _POST_END:
            length = picture[position + 1]
            post = picture[position + 3 : position + 3 + length]
            if len(post) != length:
                raise IndexError("post runs past the end of the patch")
            for row, value in enumerate(post):
                y = origin_y + top_delta + row
                if 0 <= y < height:
                    canvas[y * width + x] = value
            position += length + 4


def _parse_textures(
    data: bytes, patch_names: list[str], wad: WadFile
) -> dict[str, Texture]:
    textures: dict[str, Texture] = {}
    try:
        (count,) = _COUNT.unpack_from(data, 0)
        offsets = struct.unpack_from(f"<{max(count, 0)}i", data, _COUNT.size)
        for offset in offsets:
            raw_name, _, width, height, _, patch_count = _MAP_TEXTURE.unpack_from(
                data, offset
            )
            if width < 0 or height < 0:
                raise ValueError("texture has a negative size")
            canvas = bytearray(width * height)
            patch_base = offset + _MAP_TEXTURE.size
            for n in range(patch_count):
                origin_x, origin_y, patch_index, _, _ = _MAP_PATCH.unpack_from(
                    data, patch_base + n * _MAP_PATCH.size
                )
                if not 0 <= patch_index < len(patch_names):
                    continue
                patch = wad.find_lump(patch_names[patch_index])
                if patch is None:
                    continue
                _draw_patch(canvas, width, height, patch.data, origin_x, origin_y)
            name = _decode_name(raw_name)
            textures[name] = Texture(width, height, bytes(canvas))
    except (struct.error, IndexError) as exc:
        raise ValueError(f"malformed texture data: {exc}") from exc
    return textures


@dataclass
class TextureManager:
    """Wall textures by name together with the palette they index into."""

    textures: dict[str, Texture] = field(default_factory=dict)
    palette: list[Color] = field(default_factory=list)

    @classmethod
    def load_from_wad(cls, wad: WadFile) -> TextureManager:
        """Load the palette and the textures defined in TEXTURE1."""
        palette = load_palette(wad)
        textures: dict[str, Texture] = {}
        pnames = wad.find_lump("PNAMES")
        if pnames is not None:
            patch_names = _parse_patch_names(pnames.data)
            texture1 = wad.find_lump("TEXTURE1")
            if texture1 is not None:
                textures.update(_parse_textures(texture1.data, patch_names, wad))
        return cls(textures=textures, palette=palette)

    def get_texture(self, name: str) -> Texture | None:
        return self.textures.get(name)