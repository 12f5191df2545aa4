"""Configuration dataclasses.

:class:`LayoutConfig` holds the sheet geometry shared by the layout engine
and the renderer. :class:`Settings` holds process-level options for the
front end and is read from the environment by :func:`load_settings`.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


@dataclass(frozen=True)
class LayoutConfig:
    """Sheet geometry.

    Attributes:
        tile_size: Edge of one tile in pixels.
        canvas_size: Edge of the square raster in pixels.
        grid_size: Edge of the logical layout grid in tiles.
        padding_tiles: Margin around the layout, in tiles.
        label_height: Vertical pixels reserved above each band for labels.
    """

    tile_size: int = 4
    canvas_size: int = 1024
    grid_size: int = 256
    padding_tiles: int = 8
    label_height: int = 18

    @property
    def padding_px(self) -> int:
        return self.padding_tiles * self.tile_size


DEFAULT_LAYOUT = LayoutConfig()

STORAGE_ENV = "LOWPOLY_PALETTE_STORAGE"
LOG_LEVEL_ENV = "LOWPOLY_PALETTE_LOG_LEVEL"
DEFAULT_STORAGE_PATH = Path.home() / ".lowpoly-palette" / "selections.json"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Front-end settings.

    Attributes:
        storage_path: JSON file holding the persisted selection snapshot.
        log_level: Name of the root logging level.
        layout: Sheet geometry.
        export_filename: Default download name for the rendered sheet.
    """

    storage_path: Path = DEFAULT_STORAGE_PATH
    log_level: str = DEFAULT_LOG_LEVEL
    layout: LayoutConfig = DEFAULT_LAYOUT
    export_filename: str = "lowpoly-palette.png"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    storage = env.get(STORAGE_ENV)
    return Settings(
        storage_path=Path(storage).expanduser() if storage else DEFAULT_STORAGE_PATH,
        log_level=env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
    )
