"""Command that lists the lumps of a WAD archive."""

from __future__ import annotations

import argparse

from wadengine.wad import WadError, WadFile

DEFAULT_WAD = "./game/Doom1.WAD"


def read_wad(filename: str) -> WadFile:
    """Load an archive and print the name and size of each lump."""
    with open(filename, "rb") as handle:
        wad = WadFile.load(handle)
    for lump in wad.lumps:
        print(f"Lump: {lump.name} ({len(lump.data)} bytes)")
    return wad


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List the lumps of a WAD archive.")
    parser.add_argument("wad", nargs="?", default=DEFAULT_WAD, help="path to the WAD")
    args = parser.parse_args(argv)

    try:
        read_wad(args.wad)
    except (OSError, WadError) as exc:
        print(f"Error: {exc}")
    else:
        print("Success!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())