# wadengine

A pure-Python toolkit for WAD game archives. It has no dependencies outside the standard library.

| Module | What it offers |
| --- | --- |
| `wadengine.wad` | `WadFile.load(reader)` reads an IWAD or PWAD archive from a seekable binary stream into a list of `WadLump` (name, data). `WadFile.find_lump(name)` returns the first lump with that name, or `None`. |
| `wadengine.mapdata` | `Map.load_from_wad(wad, map_name)` decodes a level's vertices, linedefs, sidedefs, sectors and things from the lumps after its marker. `parse_vertices`, `parse_linedefs`, `parse_sidedefs`, `parse_sectors` and `parse_things` decode single lumps. |
| `wadengine.bsp` | `BspTree.load_from_wad(wad, map_name)` reads nodes, subsectors and segs. `BspTree.traverse_bsp(x, y, node_index)` lists subsector numbers, the side the point is on first, and the far side only when its bounding box lies within 1000 units. |
| `wadengine.sound` | `doom_sound_to_wav(data)` wraps a sound lump's 8-bit mono samples in a WAV header. `load_sound_effects(wad)` converts DSPISTOL, DSSHOTGN, DSPLASMA, DSBFG and DSRLAUNC where present. `spatial_mix(player_pos, sound_pos)` returns `(volume, left, right)` from distance and direction. |
| `wadengine.entities` | `Monster`, `Item`, `Projectile` and `Decoration` kinds, with `Transform`, `Collider` and `Sprite`. A `World` spawns entities (`spawn_entity`), moves active monsters towards the player at 50 units per second until they are within 50 units (`update_monsters`), and moves projectiles by their velocity (`update_projectiles`). |
| `wadengine.renderer` | `ray_angles`, `wall_slice`, `wall_color`, `sprite_draw_order` and `sprite_screen_x` compute frame geometry; `load_palette(wad)` reads PLAYPAL; `TextureManager.load_from_wad(wad)` builds textures from PNAMES and TEXTURE1, and `get_texture(name)` looks one up. |
| `wadengine.engine` | `GameState` holds the current `Map`, a `World` and the game time; `update(delta_time, player_transform)` advances both. |
| `wadengine.geometry` | `Point2D` with `origin`, `distance_to`, `dot`, `normalize`, `rotate`, `+`, `-` and `*` by a number; `str()` prints two decimals. |

## Installing

```
pip install .
```

## Listing the lumps of a WAD

```
wadengine path/to/file.wad
```

With no argument it reads `./game/Doom1.WAD`. It prints `Lump: NAME (N bytes)` for each lump and then `Success!`; if the file cannot be opened or read it prints `Error: ...` instead. The command always exits with status 0.

## Using it from Python

```python
from wadengine.wad import WadFile
from wadengine.mapdata import Map
from wadengine.bsp import BspTree

with open("file.wad", "rb") as handle:
    wad = WadFile.load(handle)

level = Map.load_from_wad(wad, "E1M1")
print(len(level.vertices), "vertices,", len(level.things), "things")

tree = BspTree.load_from_wad(wad, "E1M1")
root = len(tree.nodes) - 1
print(tree.traverse_bsp(1056.0, -3616.0, root))
```

Errors:

- a file that does not start with `IWAD` or `PWAD` raises `InvalidSignatureError`, a subclass of `WadError`; a truncated archive raises `WadError`;
- an unknown map name, or a map missing some of its lumps, raises `LookupError`;
- a lump whose length is not a whole number of records raises `ValueError`, as does a sound lump shorter than its 8-byte header;
- `load_palette` and `TextureManager.load_from_wad` raise `LookupError` when there is no PLAYPAL lump.

## What it does not do

The package computes data and geometry only. It opens no window, draws no pixels, plays no sound, reads no keyboard or mouse input and has no game loop; there is no player movement and no ray casting against level walls. `wall_slice` takes a `RayHit` you supply. The only command lists lumps.

## Running the tests

```
pip install ".[test]"
pytest
```