"""Conversion of WAD sound lumps to WAV and positional mixing parameters."""

from __future__ import annotations

import math
import struct

from wadengine.wad import WadFile

SOUND_NAMES = ("DSPISTOL", "DSSHOTGN", "DSPLASMA", "DSBFG", "DSRLAUNC")

_DOOM_HEADER = struct.Struct("<2xHI")
_WAV_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


def doom_sound_to_wav(doom_data: bytes) -> bytes:
    """Wrap the 8-bit mono samples of a sound lump in a RIFF/WAVE container."""
    if len(doom_data) < _DOOM_HEADER.size:
        raise ValueError("Invalid Doom sound data")

    sample_rate, sample_count = _DOOM_HEADER.unpack_from(doom_data)
    header = _WAV_HEADER.pack(
        b"RIFF",
        (36 + sample_count) & 0xFFFFFFFF,
        b"WAVE",
        b"fmt ",
        16,
        1,  # PCM
        1,  # mono
        sample_rate,
        sample_rate,
        1,
        8,  # bits per sample
        b"data",
        sample_count,
    )
    return header + bytes(doom_data[_DOOM_HEADER.size:])


def load_sound_effects(wad: WadFile) -> dict[str, bytes]:
    """Return WAV data for each known sound effect present in the archive."""
    effects = {}
    for name in SOUND_NAMES:
        lump = wad.find_lump(name)
        if lump is not None:
            effects[name] = doom_sound_to_wav(lump.data)
    return effects


def spatial_mix(
    player_pos: tuple[float, float], sound_pos: tuple[float, float]
) -> tuple[int, int, int]:
    """Return (volume, left, right) for a sound heard from player_pos."""
    dx = sound_pos[0] - player_pos[0]
    dy = sound_pos[1] - player_pos[1]
    distance = math.hypot(dx, dy)

    volume = max(0, min(255, int(255.0 / (1.0 + distance / 100.0))))
    pan = max(0, min(255, int((math.sin(math.atan2(dy, dx)) + 1.0) * 127.0)))
    return volume, 255 - pan, pan