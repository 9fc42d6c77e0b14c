"""Vehicle record under test."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Vehicle:
    name: str
    max_load: int
    terrain_capability: List[str] = field(default_factory=list)  # duplicates allowed
    durability: int = 0

    def increase_max_load(self, increment: int) -> None:
        self.max_load += increment

    def increase_durability(self, increment: int) -> None:
        self.durability += increment

    def add_terrain_capability(self, terrain: str) -> None:
        """Append a terrain. Existing entries are not checked."""
        self.terrain_capability.append(terrain)

    def snapshot(self) -> Dict[str, object]:
        """Plain copy of the current attributes."""
        return {
            "name": self.name,
            "max_load": self.max_load,
            "terrain_capability": list(self.terrain_capability),
            "durability": self.durability,
        }
