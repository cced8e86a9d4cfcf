"""Read-only catalog of slabs offered to the nesting optimizer."""

from __future__ import annotations

from typing import Iterable, Iterator

from stonecut.domain import Slab


class SlabSelectionError(ValueError):
    """Raised when a requested slab cannot be used for a material."""


class SlabCatalog:
    """Slab stock lookup passed explicitly into every packing run.

    The catalog never changes once built; selecting a slab for a run does
    not reserve it here. Reservation belongs to the persistence layer.
    """

    def __init__(self, slabs: Iterable[Slab]) -> None:
        self._slabs: tuple[Slab, ...] = tuple(slabs)
        self._by_id: dict[str, Slab] = {}
        for slab in self._slabs:
            self._by_id.setdefault(slab.id, slab)

    def __iter__(self) -> Iterator[Slab]:
        return iter(self._slabs)

    def __len__(self) -> int:
        return len(self._slabs)

    def __contains__(self, slab_id: object) -> bool:
        return slab_id in self._by_id

    def get(self, slab_id: str) -> Slab:
        """Return a slab by id.

        Raises:
            SlabSelectionError: If no slab has that id.
        """
        try:
            return self._by_id[slab_id]
        except KeyError:
            raise SlabSelectionError(f"Unknown slab '{slab_id}'") from None

    def for_material(self, material_id: str) -> tuple[Slab, ...]:
        """All slabs of a material, whatever their status."""
        return tuple(s for s in self._slabs if s.material_id == material_id)

    def candidates(
        self,
        material_id: str,
        exclude: Iterable[str] = (),
    ) -> tuple[Slab, ...]:
        """Slabs of a material that may still be offered, in catalog order.

        Args:
            material_id: Material the slabs must be made of.
            exclude: Ids of slabs already selected for the run.

        Returns:
            Available slabs and partial remnants not yet selected.
        """
        excluded = set(exclude)
        return tuple(
            s
            for s in self._slabs
            if s.material_id == material_id
            and s.status.is_offerable
            and s.id not in excluded
        )

    def require_candidate(
        self,
        slab_id: str,
        material_id: str,
        exclude: Iterable[str] = (),
    ) -> Slab:
        """Return a slab after checking it may be added to a material run.

        Raises:
            SlabSelectionError: If the slab is unknown, of another
                material, not offerable or already selected.
        """
        slab = self.get(slab_id)
        if slab.material_id != material_id:
            raise SlabSelectionError(
                f"Slab '{slab_id}' is material '{slab.material_id}', "
                f"expected '{material_id}'"
            )
        if not slab.status.is_offerable:
            raise SlabSelectionError(
                f"Slab '{slab_id}' is not available (status: {slab.status.value})"
            )
        if slab_id in set(exclude):
            raise SlabSelectionError(f"Slab '{slab_id}' is already selected")
        return slab
