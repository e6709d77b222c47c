"""Geometry types a feature can apply to."""
from enum import Enum


class GeometryType(Enum):
    """Spatial shape of an OSM element as used by tagging presets.

    A vertex is a node that is part of a way, as opposed to a free
    standing point.
    """
    POINT = 'point'
    VERTEX = 'vertex'
    LINE = 'line'
    AREA = 'area'
    RELATION = 'relation'

    @classmethod
    def from_name(cls, name: str) -> 'GeometryType':
        """Parse a geometry type name, case-insensitively.

        Args:
            name: 'point', 'vertex', 'line', 'area' or 'relation'

        Returns:
            Matching GeometryType

        Raises:
            ValueError: If the name is not a known geometry type
        """
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = [g.value for g in cls]
            raise ValueError(f"Unknown geometry type: {name!r}. Available: {valid}") from None

    def __str__(self) -> str:
        return self.value
