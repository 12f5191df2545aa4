"""Selection snapshot persistence.

The snapshot is a small JSON-friendly dict::

    {"selected_category_ids": ["wood", "stone"], "omit_unselected": false}

:func:`restore` treats it as a batch initializer: unknown ids are dropped
and malformed fields are ignored. File helpers never raise on I/O or decode
errors; they log a warning and fall back to an empty snapshot.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, TypedDict

from pyrsistent import pset

from lowpoly_palette.catalog.categories import CATEGORY_BY_ID
from lowpoly_palette.state import PaletteState

logger = logging.getLogger(__name__)


class Snapshot(TypedDict):
    selected_category_ids: List[str]
    omit_unselected: bool


def empty_snapshot() -> Snapshot:
    return {"selected_category_ids": [], "omit_unselected": False}


def snapshot(state: PaletteState) -> Snapshot:
    return {
        "selected_category_ids": sorted(state.selected),
        "omit_unselected": state.omit_unselected,
    }


def restore(
    data: Optional[Mapping[str, Any]], state: Optional[PaletteState] = None
) -> PaletteState:
    """Apply a persisted snapshot on top of ``state`` (default: fresh state)."""
    state = state if state is not None else PaletteState()
    if not isinstance(data, Mapping):
        return state

    ids = data.get("selected_category_ids")
    if isinstance(ids, list):
        known = [cid for cid in ids if isinstance(cid, str) and cid in CATEGORY_BY_ID]
        if len(known) != len(ids):
            logger.debug("Dropped %d unknown category ids", len(ids) - len(known))
        state = replace(state, selected=pset(known))

    omit = data.get("omit_unselected")
    if isinstance(omit, bool):
        state = replace(state, omit_unselected=omit)
    return state


def load_snapshot(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return dict(empty_snapshot())
    except (OSError, ValueError) as e:
        logger.warning("Could not load selections from %s: %s", path, e)
        return dict(empty_snapshot())
    if not isinstance(data, dict):
        logger.warning("Ignoring malformed selections file %s", path)
        return dict(empty_snapshot())
    return data


def save_snapshot(path: Path, state: PaletteState) -> bool:
    """Write the state's snapshot to ``path``. Returns False if writing failed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(snapshot(state), f, indent=2)
    except OSError as e:
        logger.warning("Could not save selections to %s: %s", path, e)
        return False
    return True
