"""Unit costs, resource bookkeeping and counting of units by type."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

from sc2bot.enums import variant_checkers

UnitId = Hashable
CountSource = Union[Mapping[Any, int], Callable[[Any], int]]
CostSource = Union[Mapping[Any, "Cost"], Callable[[Any], "Cost"]]


@dataclass
class Cost:
    """Resources, supply and time needed to make a unit or upgrade."""

    minerals: int = 0
    vespene: int = 0
    supply: float = 0.0
    time: float = 0.0


@variant_checkers
class Completion(Enum):
    """State of counted units."""

    COMPLETE = auto()
    ORDERED = auto()
    ALL = auto()


@variant_checkers
class UnitAlias(Enum):
    """Which alias forms of a unit are counted together with it."""

    NONE = auto()
    UNIT = auto()
    TECH = auto()


def _lookup_count(source: CountSource, unit_id: UnitId) -> int:
    if isinstance(source, Mapping):
        return source.get(unit_id, 0)
    return source(unit_id)


class CountOptions:
    """Counts units of a type by completion state, optionally with their aliases.

    ``current`` and ``ordered`` give the number of complete and in-progress
    units of a type, either as mappings or as callables. ``unit_alias`` maps a
    unit type to its single alternative form; ``tech_alias`` maps it to all
    the forms counted as the same tech.
    """

    def __init__(
        self,
        current: CountSource | None = None,
        ordered: CountSource | None = None,
        unit_alias: Mapping[Any, Any] | None = None,
        tech_alias: Mapping[Any, Iterable[Any]] | None = None,
    ) -> None:
        self._current: CountSource = current if current is not None else {}
        self._ordered: CountSource = ordered if ordered is not None else {}
        self._unit_alias: Mapping[Any, Any] = unit_alias or {}
        self._tech_alias: Mapping[Any, Iterable[Any]] = tech_alias or {}
        self.completion = Completion.COMPLETE
        self.unit_alias = UnitAlias.NONE

    def ordered(self) -> CountOptions:
        """Count only units in progress."""
        self.completion = Completion.ORDERED
        return self

    def all(self) -> CountOptions:
        """Count both complete and in-progress units."""
        self.completion = Completion.ALL
        return self

    def alias(self) -> CountOptions:
        """Also count the unit's alternative form."""
        self.unit_alias = UnitAlias.UNIT
        return self

    def tech(self) -> CountOptions:
        """Also count every tech alias of the unit."""
        self.unit_alias = UnitAlias.TECH
        return self

    def _count_one(self, unit_id: UnitId) -> int:
        if self.completion is Completion.COMPLETE:
            return _lookup_count(self._current, unit_id)
        if self.completion is Completion.ORDERED:
            return _lookup_count(self._ordered, unit_id)
        return _lookup_count(self._current, unit_id) + _lookup_count(self._ordered, unit_id)

    def count(self, unit_id: UnitId) -> int:
        """Return the number of units of ``unit_id`` matching these options."""
        total = self._count_one(unit_id)
        if self.unit_alias is UnitAlias.UNIT:
            alias = self._unit_alias.get(unit_id)
            if alias is not None:
                total += self._count_one(alias)
        elif self.unit_alias is UnitAlias.TECH:
            total += sum(self._count_one(alias) for alias in self._tech_alias.get(unit_id, ()))
        return total

    def __repr__(self) -> str:
        return (
            f"CountOptions(completion={self.completion.name}, "
            f"alias={self.unit_alias.name})"
        )


@dataclass
class Resources:
    """Resources and supply available to the bot on the current step."""

    minerals: int = 0
    vespene: int = 0
    supply_cap: int = 0
    supply_used: int = 0
    supply_left: int = 0

    def can_afford(self, cost: Cost, check_supply: bool = True) -> bool:
        """Check for enough resources and, optionally, free supply."""
        if self.minerals < cost.minerals or self.vespene < cost.vespene:
            return False
        if check_supply and self.supply_left < cost.supply:
            return False
        return True

    def can_afford_upgrade(self, cost: Cost) -> bool:
        """Check for enough resources to make an upgrade."""
        return self.minerals >= cost.minerals and self.vespene >= cost.vespene

    def subtract(self, cost: Cost, subtract_supply: bool = True) -> None:
        """Spend a unit's cost; resources and free supply never drop below zero."""
        self.minerals = max(0, self.minerals - cost.minerals)
        self.vespene = max(0, self.vespene - cost.vespene)
        if subtract_supply:
            supply_cost = max(0, int(cost.supply))
            self.supply_used += supply_cost
            self.supply_left = max(0, self.supply_left - supply_cost)

    def subtract_upgrade(self, cost: Cost) -> None:
        """Spend an upgrade's cost; resources never drop below zero."""
        self.minerals = max(0, self.minerals - cost.minerals)
        self.vespene = max(0, self.vespene - cost.vespene)


_PREDECESSORS: dict[str, str] = {
    "Baneling": "Zergling",
    "BanelingBurrowed": "Zergling",
    "Ravager": "Roach",
    "RavagerBurrowed": "Roach",
    "LurkerMP": "Hydralisk",
    "LurkerMPBurrowed": "Hydralisk",
    "Overseer": "Overlord",
    "OverseerSiegeMode": "Overlord",
    "BroodLord": "Corruptor",
    "OrbitalCommand": "CommandCenter",
    "OrbitalCommandFlying": "CommandCenter",
    "PlanetaryFortress": "CommandCenter",
    "Lair": "Hatchery",
    "Hive": "Lair",
    "GreaterSpire": "Spire",
    **{
        name: "Drone"
        for name in (
            "Hatchery",
            "SpineCrawler",
            "SporeCrawler",
            "Extractor",
            "SpawningPool",
            "EvolutionChamber",
            "RoachWarren",
            "BanelingNest",
            "HydraliskDen",
            "LurkerDenMP",
            "InfestationPit",
            "Spire",
            "NydusNetwork",
            "UltraliskCavern",
        )
    },
}


def _unit_name(unit: Any) -> str:
    return unit.name if isinstance(unit, Enum) else str(unit)


def _same_kind(unit: Any, name: str) -> Any:
    if isinstance(unit, Enum):
        return type(unit)[name]
    return name


def _api_cost(source: CostSource, unit: Any) -> Cost:
    if isinstance(source, Mapping):
        found = source.get(unit)
    else:
        found = source(unit)
    return Cost() if found is None else found


def corrected_unit_cost(unit: Any, api_cost: CostSource) -> Cost:
    """Return the real cost of making ``unit``.

    ``unit`` is a unit type name or enum member; ``api_cost`` gives the raw
    cost the game reports for a unit type of the same kind. Morphs cost only
    the difference to their predecessor, zerglings come in pairs.
    """
    base = _api_cost(api_cost, unit)
    cost = Cost(base.minerals, base.vespene, base.supply, base.time)
    name = _unit_name(unit)
    if name == "OverlordTransport":
        cost.minerals = 25
        cost.vespene = 25
        return cost
    if name in ("Zergling", "ZerglingBurrowed"):
        cost.minerals *= 2
        cost.supply *= 2.0
        return cost
    predecessor = _PREDECESSORS.get(name)
    if predecessor is None:
        return cost
    pred = _api_cost(api_cost, _same_kind(unit, predecessor))
    cost.minerals -= pred.minerals
    cost.vespene -= pred.vespene
    cost.supply = max(cost.supply - pred.supply, 0.0)
    return cost