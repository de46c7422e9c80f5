from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from ..config import PEA_PLACEMENT_NAME, SAVINGS_PLACEMENT_NAME
from .base import coerce_number


@dataclass
class PlacementAllocation:
    name: str
    percentage: float = 0.0

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "PlacementAllocation":
        return cls(name=str(raw.get("name") or ""), percentage=coerce_number(raw.get("percentage")))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "percentage": self.percentage}


def default_placement_allocation() -> List[PlacementAllocation]:
    return [
        PlacementAllocation(SAVINGS_PLACEMENT_NAME, 60.0),
        PlacementAllocation(PEA_PLACEMENT_NAME, 40.0),
    ]
