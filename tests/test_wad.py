import io
import struct

import pytest

from wadengine.wad import InvalidSignatureError, WadError, WadFile, WadLump


def build_wad(lumps, signature=b"IWAD", directory_first=False):
    """Assemble a WAD image from (name, data) pairs."""
    header_size = 12
    entries = []
    if directory_first:
        dir_offset = header_size
        data_start = header_size + 16 * len(lumps)
    else:
        data_start = header_size
        dir_offset = header_size + sum(len(d) for _, d in lumps)
    blob = b""
    offset = data_start
    for name, data in lumps:
        entries.append(struct.pack("<II8s", offset, len(data), name.encode()))
        blob += data
        offset += len(data)
    directory = b"".join(entries)
    header = signature + struct.pack("<II", len(lumps), dir_offset)
    if directory_first:
        return header + directory + blob
    return header + blob + directory


def test_load_reads_lumps_in_order():
    image = build_wad([("PLAYPAL", b"\x01\x02\x03"), ("E1M1", b""), ("THINGS", b"abcd")])
    wad = WadFile.load(io.BytesIO(image))
    assert [lump.name for lump in wad.lumps] == ["PLAYPAL", "E1M1", "THINGS"]
    assert [lump.data for lump in wad.lumps] == [b"\x01\x02\x03", b"", b"abcd"]


def test_pwad_signature_is_accepted():
    wad = WadFile.load(io.BytesIO(build_wad([("MAP01", b"x")], signature=b"PWAD")))
    assert wad.lumps == [WadLump("MAP01", b"x")]


def test_directory_before_data():
    image = build_wad([("A", b"first"), ("B", b"second")], directory_first=True)
    wad = WadFile.load(io.BytesIO(image))
    assert wad.find_lump("B").data == b"second"
    assert wad.find_lump("A").data == b"first"


def test_eight_character_name_is_kept_whole():
    wad = WadFile.load(io.BytesIO(build_wad([("TEXTURE1", b"t")])))
    assert wad.lumps[0].name == "TEXTURE1"


def test_empty_archive():
    wad = WadFile.load(io.BytesIO(build_wad([])))
    assert wad.lumps == []


def test_invalid_signature():
    image = build_wad([("A", b"x")], signature=b"ZWAD")
    with pytest.raises(InvalidSignatureError):
        WadFile.load(io.BytesIO(image))


def test_invalid_signature_is_wad_error():
    with pytest.raises(WadError, match="Invalid WAD signature"):
        WadFile.load(io.BytesIO(b"JUNK" + bytes(8)))


def test_truncated_header():
    with pytest.raises(WadError):
        WadFile.load(io.BytesIO(b"IWAD\x01\x00"))


def test_truncated_lump_data():
    image = build_wad([("A", b"abcdef")])
    header = image[:12]
    directory = image[-16:]
    offset, size, name = struct.unpack("<II8s", directory)
    bad_directory = struct.pack("<II8s", offset, size + 100, name)
    with pytest.raises(WadError):
        WadFile.load(io.BytesIO(header + image[12:-16] + bad_directory))


def test_missing_directory_entries():
    image = b"IWAD" + struct.pack("<II", 3, 12)
    with pytest.raises(WadError):
        WadFile.load(io.BytesIO(image))


def test_find_lump_returns_first_match():
    wad = WadFile([WadLump("THINGS", b"1"), WadLump("THINGS", b"2")])
    assert wad.find_lump("THINGS").data == b"1"


def test_find_lump_missing_returns_none():
    wad = WadFile([WadLump("THINGS", b"1")])
    assert wad.find_lump("VERTEXES") is None