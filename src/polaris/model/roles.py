"""
Role Data
=========
Roles as delivered by the role data source, before any layout happens.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

DEFAULT_ROLE_COLOR = "#6366f1"
METRIC_NAMES = ("technical", "creative", "business", "customer")


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}.")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Expected a number, got {value!r}.") from None


@dataclass(frozen=True)
class MetricVector:
    """
    Work-style profile of a role, each score expected in [0, 10].

    A field left as None was absent in the source data; the projection counts it as 0.
    """
    technical: Optional[float] = None
    creative: Optional[float] = None
    business: Optional[float] = None
    customer: Optional[float] = None

    def to_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> MetricVector:
        return MetricVector(**{name: _optional_float(data.get(name)) for name in METRIC_NAMES})


@dataclass(frozen=True)
class Role:
    name: str
    metrics: MetricVector = field(default_factory=MetricVector)
    color: str = DEFAULT_ROLE_COLOR
    distance: Optional[float] = None  # None -> default distance 5

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Role:
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Role entry without a valid name: {data!r}")
        return Role(
            name=name,
            metrics=MetricVector.from_dict(data),
            color=str(data.get("color") or DEFAULT_ROLE_COLOR),
            distance=_optional_float(data.get("distance")),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "color": self.color}
        data.update(self.metrics.to_dict())
        if self.distance is not None:
            data["distance"] = self.distance
        return data


@dataclass(frozen=True)
class RoleBatch:
    """One answer of the role data source."""
    roles: tuple[Role, ...] = ()
    personalized: bool = False

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for role in self.roles:
            if role.name in seen:
                raise ValueError(f"Role with name '{role.name}' already exists.")
            seen.add(role.name)

    @property
    def names(self) -> List[str]:
        return [role.name for role in self.roles]

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> RoleBatch:
        raw_roles = data.get("roles")
        if not isinstance(raw_roles, list):
            raise ValueError("Role payload must contain a 'roles' list.")
        personalized = data.get("personalized", False)
        if not isinstance(personalized, bool):
            raise ValueError(f"'personalized' must be true or false, got {personalized!r}.")
        return RoleBatch(
            roles=tuple(Role.from_dict(item) for item in raw_roles),
            personalized=personalized,
        )
