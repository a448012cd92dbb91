"""Style cascade: per-region property lists with override-by-key semantics."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .logger import get_logger

logger = get_logger()

REGIONS: tuple[str, ...] = (
    "container",
    "title",
    "chart-container",
    "chart",
    "chart-elements",
    "legend",
    "legend-labels",
)
"""Region vocabulary. Renderers only ever look up these names."""

Property = tuple[str, str]
PropertyList = tuple[Property, ...]


def override(properties: PropertyList, name: str, value: str) -> PropertyList:
    """Return ``properties`` with ``name`` removed and ``(name, value)`` prepended."""
    return ((name, value), *(prop for prop in properties if prop[0] != name))


class StyleCascade:
    """Persistent mapping from region name to an ordered property list.

    Property names are unique within a region. The most recently merged value
    for a property wins and sits at the front of the region's list. Regions
    only come into existence through :meth:`seed`; :meth:`merge` on a region
    that was never seeded leaves the cascade unchanged.

    Instances are never mutated: every update returns a new cascade.
    """

    __slots__ = ("_regions",)

    def __init__(self) -> None:
        self._regions: dict[str, PropertyList] = {}

    def seed(self, region: str, properties: Iterable[Property] = ()) -> StyleCascade:
        """Insert ``region`` if absent, then merge ``properties`` into it."""
        cascade = self._copy()
        cascade._regions.setdefault(region, ())
        return cascade.merge(region, properties)

    def merge(self, region: str, properties: Iterable[Property]) -> StyleCascade:
        """Override each property of an already-seeded region, in order."""
        if region not in self._regions:
            logger.checks(f"Ignoring style override for unseeded region '{region}'")
            return self
        cascade = self._copy()
        current = cascade._regions[region]
        for name, value in properties:
            current = override(current, name, value)
        cascade._regions[region] = current
        return cascade

    def get(self, region: str) -> PropertyList:
        """Resolved property list for ``region``; empty when not seeded."""
        return self._regions.get(region, ())

    def value(self, region: str, name: str) -> str | None:
        """Current value of one property, or None."""
        for prop_name, prop_value in self.get(region):
            if prop_name == name:
                return prop_value
        return None

    def regions(self) -> list[str]:
        """Seeded region names in seeding order."""
        return list(self._regions)

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Plain nested dict, property order preserved."""
        return {region: dict(props) for region, props in self._regions.items()}

    def _copy(self) -> StyleCascade:
        cascade = StyleCascade()
        cascade._regions = dict(self._regions)
        return cascade

    def __contains__(self, region: object) -> bool:
        return region in self._regions

    def __iter__(self) -> Iterator[str]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleCascade):
            return NotImplemented
        return self._regions == other._regions

    def __hash__(self) -> int:
        return hash(tuple(self._regions.items()))

    def __repr__(self) -> str:
        return f"StyleCascade({self._regions!r})"
