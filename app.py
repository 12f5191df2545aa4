import io
import logging
from typing import List, Optional

import streamlit as st

from lowpoly_palette.actions import (
    clear_all,
    select_all,
    select_categories,
    set_colorblind_mode,
    set_omit_unselected,
    set_theme,
    set_warmth,
)
from lowpoly_palette.catalog import (
    CATEGORIES,
    CATEGORY_BY_ID,
    COLORBLIND_LABELS,
    THEME_REGISTRY,
)
from lowpoly_palette.components import Category
from lowpoly_palette.config import Settings, load_settings
from lowpoly_palette.layout import find_category_at, region_highlight
from lowpoly_palette.persistence import load_snapshot, restore, save_snapshot
from lowpoly_palette.renderer.palette import render
from lowpoly_palette.state import PaletteState
from lowpoly_palette.systems.tile_color import swatch_color
from lowpoly_palette.utils.color import hex_color

WARMTH_MIN = -30
WARMTH_MAX = 30

st.set_page_config(layout="wide", page_title="Low-Poly Palette")


def set_default_state(settings: Settings) -> None:
    if "palette_state" not in st.session_state:
        logging.basicConfig(level=settings.log_level)
        st.session_state["palette_state"] = restore(
            load_snapshot(settings.storage_path)
        )


def category_label(category_id: str) -> str:
    category = CATEGORY_BY_ID[category_id]
    return f"{category.icon} {category.name} ({category.tiles.width}×{category.tiles.height})"


def get_state_from_widgets(state: PaletteState) -> PaletteState:
    st.subheader("Categories")
    col1, col2 = st.columns([1, 1])
    with col1:
        if st.button("Select all", use_container_width=True):
            state = select_all(state)
    with col2:
        if st.button("Clear all", use_container_width=True):
            state = clear_all(state)

    category_ids: List[str] = [c.id for c in CATEGORIES]
    chosen: List[str] = st.multiselect(
        "Selected categories",
        category_ids,
        default=[cid for cid in category_ids if cid in state.selected],
        format_func=category_label,
    )
    state = select_categories(state, chosen)
    st.caption(f"{len(state.selected)} / {len(CATEGORIES)} selected")

    st.subheader("Adjustments")
    theme_ids: List[str] = list(THEME_REGISTRY.keys())
    theme_id: str = st.selectbox(
        "Theme",
        theme_ids,
        index=theme_ids.index(state.theme_id) if state.theme_id in theme_ids else 0,
        format_func=lambda tid: THEME_REGISTRY[tid].name,
    )
    state = set_theme(state, theme_id)

    warmth: int = st.slider("Warmth", WARMTH_MIN, WARMTH_MAX, state.warmth)
    state = set_warmth(state, warmth)

    modes: List[str] = [str(m) for m in COLORBLIND_LABELS]
    mode: str = st.selectbox(
        "Colorblind simulation",
        modes,
        index=modes.index(state.colorblind_mode) if state.colorblind_mode in modes else 0,
        format_func=lambda m: COLORBLIND_LABELS[m],  # type: ignore[index]
    )
    state = set_colorblind_mode(state, mode)

    omit: bool = st.checkbox("Omit unselected", value=state.omit_unselected)
    return set_omit_unselected(state, omit)


def display_swatches(state: PaletteState) -> None:
    for category in CATEGORIES:
        if category.id not in state.selected:
            continue
        color = hex_color(swatch_color(category))
        st.markdown(
            f"<span style='background:{color};padding:0 0.8em;margin-right:0.5em'>"
            f"</span>{category.icon} **{category.name}** · {category.description}",
            unsafe_allow_html=True,
        )


def display_probe(state: PaletteState, settings: Settings) -> None:
    size = settings.layout.canvas_size
    col1, col2 = st.columns([1, 1])
    with col1:
        x: int = st.number_input("Pointer x", min_value=0, max_value=size - 1, value=0)
    with col2:
        y: int = st.number_input("Pointer y", min_value=0, max_value=size - 1, value=0)
    hit: Optional[Category] = find_category_at(x, y, state, config=settings.layout)
    if hit is None:
        st.info("No category under pointer", icon="🖱️")
        return
    rect = region_highlight(hit, config=settings.layout).rect
    st.success(
        f"{hit.icon} {hit.name}: left={rect.left:.0f} top={rect.top:.0f} "
        f"width={rect.width:.0f} height={rect.height:.0f}"
    )


# --------- Main App ---------

settings = load_settings()
set_default_state(settings)

left_col, right_col = st.columns([0.3, 0.7])

with left_col:
    previous: PaletteState = st.session_state["palette_state"]
    current = get_state_from_widgets(previous)
    if current != previous:
        st.session_state["palette_state"] = current
        save_snapshot(settings.storage_path, current)

with right_col:
    state: PaletteState = st.session_state["palette_state"]
    image = render(state, config=settings.layout)
    st.image(image, use_container_width=True)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    st.download_button(
        "Download PNG",
        data=buffer.getvalue(),
        file_name=settings.export_filename,
        mime="image/png",
        use_container_width=True,
    )

    with st.expander("Hit test"):
        display_probe(state, settings)
    with st.expander("Selected swatches"):
        display_swatches(state)
