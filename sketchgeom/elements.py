"""Element records and the read-only scene snapshot consumed by routing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .types import LocalPoint, Point

logger = logging.getLogger(__name__)

LINEAR_ELEMENT_TYPES = frozenset({"arrow", "line"})
FREEDRAW_ELEMENT_TYPES = frozenset({"freedraw"})

ElementsMap = Mapping[str, "Element"]


@dataclass(frozen=True)
class Binding:
    """Reference from a connector endpoint to a target element."""

    element_id: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Binding":
        element_id = data.get("elementId", data.get("element_id"))
        if not isinstance(element_id, str) or not element_id:
            raise ValueError(f"binding requires an element id, got {element_id!r}")
        return cls(element_id=element_id)


@dataclass(frozen=True)
class Element:
    id: str
    type: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    angle: float = 0.0
    points: Tuple[LocalPoint, ...] = field(default_factory=tuple)
    is_deleted: bool = False
    start_binding: Optional[Binding] = None
    end_binding: Optional[Binding] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "points", tuple((float(p[0]), float(p[1])) for p in self.points)
        )

    @property
    def is_linear(self) -> bool:
        return self.type in LINEAR_ELEMENT_TYPES

    @property
    def has_points(self) -> bool:
        return self.type in LINEAR_ELEMENT_TYPES or self.type in FREEDRAW_ELEMENT_TYPES

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Element":
        """Build an element from an editor-style dict (camelCase keys accepted)."""

        def _binding(*keys: str) -> Optional[Binding]:
            for key in keys:
                raw = data.get(key)
                if raw:
                    return Binding.from_dict(raw)
            return None

        try:
            element_id = data["id"]
            element_type = data["type"]
        except KeyError as exc:
            raise ValueError(f"element is missing required key {exc.args[0]!r}") from exc

        return cls(
            id=str(element_id),
            type=str(element_type),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            width=float(data.get("width", 0.0)),
            height=float(data.get("height", 0.0)),
            angle=float(data.get("angle", 0.0)),
            points=tuple(tuple(p) for p in data.get("points", ())),
            is_deleted=bool(data.get("isDeleted", data.get("is_deleted", False))),
            start_binding=_binding("startBinding", "start_binding"),
            end_binding=_binding("endBinding", "end_binding"),
        )


class Scene:
    """Immutable snapshot of the element store.

    Every lookup made during one routing call sees the same elements, so a
    ``Scene`` can be shared between threads as long as nobody mutates the
    elements it was built from.
    """

    def __init__(self, elements: Iterable[Element]) -> None:
        ordered: List[Element] = []
        by_id: Dict[str, Element] = {}
        for element in elements:
            if element.id in by_id:
                logger.warning("Duplicate element id %s in scene; keeping the last one", element.id)
                ordered = [el for el in ordered if el.id != element.id]
            ordered.append(element)
            by_id[element.id] = element
        self._elements: Tuple[Element, ...] = tuple(ordered)
        self._non_deleted: Tuple[Element, ...] = tuple(el for el in ordered if not el.is_deleted)
        self._non_deleted_map = MappingProxyType({el.id: el for el in self._non_deleted})
        logger.info(
            "Built scene snapshot with %d element(s), %d non-deleted",
            len(self._elements),
            len(self._non_deleted),
        )

    @classmethod
    def from_dicts(cls, items: Iterable[Mapping[str, Any]]) -> "Scene":
        return cls(Element.from_dict(item) for item in items)

    def get_non_deleted_elements_map(self) -> ElementsMap:
        return self._non_deleted_map

    def get_non_deleted_elements(self) -> List[Element]:
        return list(self._non_deleted)

    def get_element(self, element_id: str) -> Optional[Element]:
        return self._non_deleted_map.get(element_id)

    def __len__(self) -> int:
        return len(self._elements)


def to_world_space(element: Element, point: LocalPoint) -> Point:
    return point[0] + element.x, point[1] + element.y


def to_local_space(element: Element, point: Point) -> LocalPoint:
    return point[0] - element.x, point[1] - element.y


__all__ = [
    "Binding",
    "Element",
    "ElementsMap",
    "FREEDRAW_ELEMENT_TYPES",
    "LINEAR_ELEMENT_TYPES",
    "Scene",
    "to_local_space",
    "to_world_space",
]
