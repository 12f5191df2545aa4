"""Material category catalog.

The catalog is laid out in six horizontal bands (see
:data:`lowpoly_palette.layout.ROW_BANDS`). Positions and sizes are in tile
units on a 256x256 logical grid; the band label offsets are added by the
layout engine, not here.
"""

import logging
from typing import Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from lowpoly_palette.components import Category, ColorRanges, GridPosition, TileSize
from lowpoly_palette.types import CategoryID, Range

logger = logging.getLogger(__name__)


def _category(
    id: CategoryID,
    name: str,
    icon: str,
    description: str,
    tiles: Tuple[int, int],
    position: Tuple[int, int],
    hue: Range,
    sat: Range,
    light: Range,
) -> Category:
    return Category(
        id=id,
        name=name,
        icon=icon,
        description=description,
        tiles=TileSize(*tiles),
        position=GridPosition(*position),
        colors=ColorRanges(hue_range=hue, saturation_range=sat, lightness_range=light),
    )


CATEGORIES: Tuple[Category, ...] = (
    # --- Band 0: core materials ---
    _category("wood", "Wood", "🪵", "Light to dark wood tones, warm to cool",
              (48, 48), (0, 0), (20, 40), (30, 60), (25, 70)),
    _category("bark", "Bark", "🌳", "Darker, textured tree bark tones",
              (32, 32), (48, 0), (15, 35), (20, 45), (15, 40)),
    _category("metal_raw", "Metal (Raw)", "⚙️", "Steel, iron, silver - raw metal surfaces",
              (40, 40), (80, 0), (200, 220), (0, 15), (30, 85)),
    _category("metal_painted", "Painted Metal", "🎨", "Industrial painted surfaces",
              (32, 32), (120, 0), (0, 360), (40, 70), (35, 65)),
    _category("plastic", "Plastic", "🧴", "Bright and muted plastic colors",
              (32, 32), (152, 0), (0, 360), (50, 85), (45, 75)),
    _category("rubber", "Rubber", "⚫", "Dark, low saturation rubber",
              (24, 24), (184, 0), (0, 30), (5, 20), (10, 35)),
    _category("glass", "Glass", "🔮", "Clear, frosted, and tinted glass",
              (24, 24), (208, 0), (180, 220), (10, 40), (60, 95)),
    # --- Band 1: ground and vegetation ---
    _category("stone", "Stone", "🪨", "Natural stone and rock surfaces",
              (32, 32), (0, 48), (20, 50), (5, 20), (25, 70)),
    _category("concrete", "Concrete", "🏗️", "Neutral grey concrete",
              (24, 24), (32, 48), (40, 60), (0, 10), (35, 65)),
    _category("brick", "Brick / Masonry", "🧱", "Red and brown brick shades",
              (24, 24), (56, 48), (5, 25), (40, 65), (25, 50)),
    _category("dirt", "Dirt / Soil", "🌍", "Warm earth tones",
              (24, 24), (80, 48), (20, 40), (30, 55), (15, 40)),
    _category("sand", "Sand / Gravel", "🏖️", "Light neutral sandy tones",
              (24, 24), (104, 48), (35, 50), (20, 45), (55, 85)),
    _category("foliage", "Foliage", "🍃", "Leaves and plant greens",
              (32, 32), (128, 48), (80, 140), (35, 70), (25, 60)),
    _category("grass", "Grass / Ground", "🌿", "Fresh and dry grass",
              (24, 24), (160, 48), (60, 120), (30, 65), (30, 55)),
    # --- Band 2: cold, water, soft goods ---
    _category("snow", "Snow", "❄️", "White and blue-white shades",
              (24, 24), (0, 80), (200, 220), (0, 15), (85, 100)),
    _category("ice", "Ice", "🧊", "Cool blue ice tones",
              (24, 24), (24, 80), (190, 210), (20, 50), (65, 90)),
    _category("water", "Water", "💧", "Deep to shallow water blues",
              (24, 24), (48, 80), (190, 220), (40, 70), (30, 70)),
    _category("fabric", "Fabric / Cloth", "🧵", "Varied cloth colors",
              (24, 24), (72, 80), (0, 360), (25, 60), (35, 70)),
    _category("leather", "Leather", "👜", "Brown and black leather",
              (24, 24), (96, 80), (15, 35), (30, 55), (15, 45)),
    _category("paper", "Paper / Cardboard", "📄", "Warm neutral paper tones",
              (24, 24), (120, 80), (35, 50), (15, 35), (65, 90)),
    _category("emissive", "Emissive", "💡", "Bright glowing colors",
              (24, 24), (144, 80), (0, 360), (70, 100), (55, 80)),
    # --- Band 3: natural and environmental ---
    _category("coral", "Coral", "🐚", "Ocean coral and shell tones",
              (20, 20), (0, 112), (0, 40), (40, 70), (60, 85)),
    _category("moss", "Moss", "🌱", "Damp green moss and lichen",
              (20, 20), (20, 112), (70, 130), (25, 55), (20, 45)),
    _category("flowers", "Flowers", "🌸", "Colorful flower petals",
              (20, 20), (40, 112), (280, 360), (50, 85), (50, 80)),
    _category("mud", "Mud", "🟤", "Wet muddy earth tones",
              (20, 20), (60, 112), (20, 35), (35, 60), (10, 30)),
    _category("smoke", "Smoke", "🌫️", "Atmospheric smoke and fog",
              (20, 20), (80, 112), (200, 220), (0, 10), (60, 90)),
    _category("ash", "Ash", "🌑", "Dark ash and dust particles",
              (20, 20), (100, 112), (0, 30), (0, 15), (15, 40)),
    _category("frost", "Frost", "❄️", "Crystalline ice and frost",
              (20, 20), (120, 112), (190, 220), (30, 60), (75, 98)),
    _category("water_variants", "Water+", "🌊", "Shallow, deep, murky water",
              (20, 20), (140, 112), (180, 220), (35, 75), (25, 70)),
    _category("autumn", "Autumn", "🍂", "Red, orange, yellow fall colors",
              (20, 20), (160, 112), (10, 50), (60, 90), (35, 65)),
    _category("spring", "Spring", "🌷", "Fresh greens, floral accents",
              (20, 20), (180, 112), (80, 150), (50, 80), (45, 75)),
    # --- Band 4: metals and synthetics ---
    _category("rusty_metal", "Rusty", "🔩", "Corroded iron and steel",
              (20, 20), (0, 136), (15, 35), (50, 75), (20, 45)),
    _category("brushed_metal", "Brushed", "🔧", "Aluminum, chrome, steel finishes",
              (20, 20), (20, 136), (200, 220), (5, 20), (50, 90)),
    _category("gems", "Gems", "💎", "Diamond, ruby, sapphire, emerald",
              (24, 20), (40, 136), (0, 360), (60, 95), (40, 75)),
    _category("ceramic", "Ceramic", "🏺", "Glazed ceramic and porcelain",
              (20, 20), (64, 136), (200, 240), (10, 40), (70, 95)),
    _category("foam", "Foam", "🧽", "Soft foam and sponge materials",
              (20, 20), (84, 136), (40, 60), (40, 70), (65, 90)),
    _category("vinyl", "Vinyl", "📀", "Glossy or matte vinyl",
              (20, 20), (104, 136), (0, 360), (40, 80), (50, 80)),
    _category("synthetic_fabric", "Synth", "🧥", "Nylon, polyester, synthetic leather",
              (20, 20), (124, 136), (0, 360), (30, 60), (25, 55)),
    _category("carpet", "Carpet", "🧶", "Patterned carpet textures",
              (20, 20), (144, 136), (0, 40), (30, 60), (30, 55)),
    _category("winter", "Winter", "🌨️", "Icy blue, white, subtle purple",
              (20, 20), (164, 136), (200, 280), (15, 45), (70, 95)),
    _category("desert", "Desert", "🏜️", "Warm sands, dry foliage",
              (20, 20), (184, 136), (30, 55), (35, 65), (50, 80)),
    # --- Band 5: stylized and game ---
    _category("alien", "Alien", "👽", "Unusual hues, glowing surfaces",
              (20, 20), (0, 160), (140, 200), (60, 95), (30, 65)),
    _category("magic", "Magic", "✨", "Glowing crystals, runes, energy",
              (20, 20), (20, 160), (260, 320), (70, 100), (50, 80)),
    _category("cartoon", "Cartoon", "🎈", "Saturated or pastel plastics",
              (20, 20), (40, 160), (0, 360), (70, 100), (60, 85)),
    _category("food", "Food", "🍎", "Bread, fruit, vegetables, meat",
              (24, 20), (60, 160), (0, 60), (45, 80), (35, 70)),
    _category("rubber_variants", "Rubber+", "🛞", "Colored and transparent rubber",
              (20, 20), (84, 160), (0, 360), (20, 50), (15, 40)),
    _category("sand_variants", "Sand+", "🏝️", "Desert, volcanic, colored sand",
              (20, 20), (104, 160), (25, 50), (30, 60), (45, 80)),
)

CATEGORY_BY_ID: PMap[CategoryID, Category] = pmap({c.id: c for c in CATEGORIES})

CATEGORY_IDS: Tuple[CategoryID, ...] = tuple(c.id for c in CATEGORIES)


def get_category(category_id: CategoryID) -> Optional[Category]:
    """Return the catalog entry for ``category_id`` or ``None`` if unknown."""
    category = CATEGORY_BY_ID.get(category_id)
    if category is None:
        logger.debug("Unknown category id %r", category_id)
    return category
