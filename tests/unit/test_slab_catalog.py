"""Tests for the read-only slab catalog."""

from __future__ import annotations

import pytest

from stonecut.application import SlabCatalog, SlabSelectionError
from stonecut.domain import Slab, SlabStatus


def _slab(id: str, material_id: str = "granite", status: SlabStatus = SlabStatus.AVAILABLE) -> Slab:
    return Slab(id=id, material_id=material_id, width=300, height=200, status=status)


@pytest.fixture
def catalog() -> SlabCatalog:
    return SlabCatalog(
        [
            _slab("g1"),
            _slab("m1", material_id="marble"),
            _slab("g2", status=SlabStatus.RESERVED),
            _slab("g3", status=SlabStatus.PARTIAL),
            _slab("g4", status=SlabStatus.CONSUMED),
            _slab("g5"),
        ]
    )


class TestLookup:
    """Tests for id lookup."""

    def test_get(self, catalog: SlabCatalog) -> None:
        assert catalog.get("m1").material_id == "marble"

    def test_get_unknown(self, catalog: SlabCatalog) -> None:
        with pytest.raises(SlabSelectionError, match="Unknown slab 'x'"):
            catalog.get("x")

    def test_container_protocol(self, catalog: SlabCatalog) -> None:
        assert len(catalog) == 6
        assert "g1" in catalog
        assert "x" not in catalog
        assert [s.id for s in catalog] == ["g1", "m1", "g2", "g3", "g4", "g5"]

    def test_for_material_ignores_status(self, catalog: SlabCatalog) -> None:
        assert [s.id for s in catalog.for_material("granite")] == ["g1", "g2", "g3", "g4", "g5"]


class TestCandidates:
    """Tests for candidate selection."""

    def test_only_available_and_partial(self, catalog: SlabCatalog) -> None:
        assert [s.id for s in catalog.candidates("granite")] == ["g1", "g3", "g5"]

    def test_excludes_selected(self, catalog: SlabCatalog) -> None:
        assert [s.id for s in catalog.candidates("granite", exclude=["g1"])] == ["g3", "g5"]

    def test_unknown_material(self, catalog: SlabCatalog) -> None:
        assert catalog.candidates("quartz") == ()

    def test_require_candidate(self, catalog: SlabCatalog) -> None:
        assert catalog.require_candidate("g3", "granite").id == "g3"

    def test_require_candidate_wrong_material(self, catalog: SlabCatalog) -> None:
        with pytest.raises(SlabSelectionError, match="expected 'granite'"):
            catalog.require_candidate("m1", "granite")

    def test_require_candidate_unavailable(self, catalog: SlabCatalog) -> None:
        with pytest.raises(SlabSelectionError, match="not available"):
            catalog.require_candidate("g2", "granite")

    def test_require_candidate_already_selected(self, catalog: SlabCatalog) -> None:
        with pytest.raises(SlabSelectionError, match="already selected"):
            catalog.require_candidate("g1", "granite", exclude=("g1",))

    def test_selection_error_is_value_error(self) -> None:
        assert issubclass(SlabSelectionError, ValueError)
