import json
import logging
from pathlib import Path

import pytest

from lowpoly_palette.persistence import (
    empty_snapshot,
    load_snapshot,
    restore,
    save_snapshot,
    snapshot,
)
from lowpoly_palette.state import PaletteState
from tests.test_utils import make_state


def test_snapshot_is_sorted_and_serializable() -> None:
    state = make_state(["wood", "glass", "bark"], omit_unselected=True, theme_id="icy")
    data = snapshot(state)
    assert data == {
        "selected_category_ids": ["bark", "glass", "wood"],
        "omit_unselected": True,
    }
    json.dumps(data)


def test_restore_drops_unknown_ids() -> None:
    state = restore(
        {"selected_category_ids": ["wood", "mithril", 3, "stone"], "omit_unselected": True}
    )
    assert set(state.selected) == {"wood", "stone"}
    assert state.omit_unselected is True


def test_restore_keeps_other_fields() -> None:
    base = make_state(theme_id="neon", warmth=9)
    state = restore({"selected_category_ids": ["ice"]}, base)
    assert state.theme_id == "neon"
    assert state.warmth == 9
    assert set(state.selected) == {"ice"}


@pytest.mark.parametrize(
    "data",
    [None, [], "wood", {"selected_category_ids": "wood", "omit_unselected": "yes"}],
)
def test_restore_ignores_malformed(data: object) -> None:
    assert restore(data) == PaletteState()  # type: ignore[arg-type]


def test_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "selections.json"
    state = make_state(["water", "ice"], omit_unselected=True)
    assert save_snapshot(path, state) is True
    assert restore(load_snapshot(path)) == make_state(
        ["water", "ice"], omit_unselected=True
    )


def test_load_missing_file(tmp_path: Path) -> None:
    assert load_snapshot(tmp_path / "missing.json") == empty_snapshot()


def test_load_corrupt_file_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "selections.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="lowpoly_palette.persistence"):
        assert load_snapshot(path) == empty_snapshot()
    assert "Could not load selections" in caplog.text


def test_load_non_utf8_file_warns(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "selections.json"
    path.write_bytes(b'{"selected_category_ids": ["\xff\xfe"]}')
    with caplog.at_level(logging.WARNING, logger="lowpoly_palette.persistence"):
        assert load_snapshot(path) == empty_snapshot()
    assert "Could not load selections" in caplog.text


def test_load_non_object_json(tmp_path: Path) -> None:
    path = tmp_path / "selections.json"
    path.write_text('["wood"]', encoding="utf-8")
    assert load_snapshot(path) == empty_snapshot()


def test_save_failure_returns_false(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="lowpoly_palette.persistence"):
        assert save_snapshot(tmp_path, PaletteState()) is False
    assert "Could not save selections" in caplog.text
