"""Read WAD archives and decode their levels, BSP trees, sounds, palettes and textures, with a small game-world simulation."""

__version__ = "0.1.0"