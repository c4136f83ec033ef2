import struct

from wadengine.cli import main, read_wad


def _write_wad(path, lumps, signature=b"PWAD"):
    data = b"".join(content for _, content in lumps)
    directory_offset = 12 + len(data)
    directory = b""
    position = 12
    for name, content in lumps:
        directory += struct.pack("<II8s", position, len(content), name.encode())
        position += len(content)
    path.write_bytes(
        signature + struct.pack("<II", len(lumps), directory_offset) + data + directory
    )
    return path


def test_read_wad_lists_lumps(tmp_path, capsys):
    path = _write_wad(tmp_path / "a.wad", [("E1M1", b""), ("THINGS", b"abcd")])
    wad = read_wad(str(path))
    out = capsys.readouterr().out.splitlines()
    assert out == ["Lump: E1M1 (0 bytes)", "Lump: THINGS (4 bytes)"]
    assert [lump.name for lump in wad.lumps] == ["E1M1", "THINGS"]


def test_main_reports_success(tmp_path, capsys):
    path = _write_wad(tmp_path / "b.wad", [("PLAYPAL", b"\x01\x02\x03")])
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Success!"
    assert "Lump: PLAYPAL (3 bytes)" in out


def test_main_reports_bad_signature(tmp_path, capsys):
    path = _write_wad(tmp_path / "c.wad", [], signature=b"ZWAD")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "Error: Invalid WAD signature"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.wad")]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Error: ")
    assert "Success!" not in out