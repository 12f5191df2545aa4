"""Rendering subpackage.

Turns an immutable ``PaletteState`` into the palette sheet image. The
renderer focuses on:

* Full recomputation on every call: the surface is created fresh, so no stale
  pixels survive a state change.
* NumPy block placement of per-category colour grids, one ``tile x tile``
  cell per generated colour.
* Pillow drawing for region borders and band labels.

See :mod:`lowpoly_palette.renderer.palette` for the composition routines.
"""
