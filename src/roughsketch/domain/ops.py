"""Drawing operation model.

This module defines the renderer-agnostic output of the generator:
- Op: One drawing instruction (move, straight segment or cubic curve)
- OpSet: An ordered, typed sequence of operations
- Drawable: All operation sets produced for one shape

Renderers replay operations in order. Fill-path sets are closed and filled,
fill-sketch and path sets are stroked.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from roughsketch.domain.primitives import Point

if TYPE_CHECKING:
    from roughsketch.config import DrawConfig


class OpType(Enum):
    """Kind of drawing instruction."""

    MOVE = "move"
    LINE_TO = "line_to"
    CURVE_TO = "curve_to"


class OpSetType(Enum):
    """How a renderer should paint an operation set.

    - PATH: outline, stroked
    - FILL_PATH: closed and filled as a solid region
    - FILL_SKETCH: interior pattern strokes, stroked and never closed
    """

    PATH = "path"
    FILL_PATH = "fill_path"
    FILL_SKETCH = "fill_sketch"


_POINT_COUNTS = {
    OpType.MOVE: 1,
    OpType.LINE_TO: 1,
    OpType.CURVE_TO: 3,
}


@dataclass(frozen=True, slots=True)
class Op:
    """A single drawing instruction.

    Move and line-to carry one point. Curve-to carries two control points
    followed by the end point.

    Attributes:
        op: Instruction kind
        data: Points carried by the instruction
    """

    op: OpType
    data: tuple[Point, ...]

    def __post_init__(self) -> None:
        expected = _POINT_COUNTS[self.op]
        if len(self.data) != expected:
            raise ValueError(
                f"{self.op.value} expects {expected} point(s), got {len(self.data)}"
            )

    @classmethod
    def move(cls, point: Point) -> "Op":
        return cls(OpType.MOVE, (point,))

    @classmethod
    def line_to(cls, point: Point) -> "Op":
        return cls(OpType.LINE_TO, (point,))

    @classmethod
    def curve_to(cls, control1: Point, control2: Point, end: Point) -> "Op":
        return cls(OpType.CURVE_TO, (control1, control2, end))

    @property
    def end(self) -> Point:
        """Point the pen rests on after this instruction."""
        return self.data[-1]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with op name and point list
        """
        return {"op": self.op.value, "data": [p.to_dict() for p in self.data]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Op":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an operation

        Returns:
            Op instance
        """
        return cls(OpType(data["op"]), tuple(Point.from_dict(p) for p in data["data"]))


@dataclass(frozen=True, slots=True)
class OpSet:
    """An ordered sequence of operations with a paint type.

    Attributes:
        type: How the set is painted
        ops: Operations in replay order
    """

    type: OpSetType
    ops: tuple[Op, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.ops

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[Op]:
        return iter(self.ops)

    def points(self) -> list[Point]:
        """All points carried by the operations, control points included."""
        return [p for op in self.ops for p in op.data]

    def end_points(self) -> list[Point]:
        """Points the pen rests on after each operation."""
        return [op.end for op in self.ops]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with type and operation list
        """
        return {"type": self.type.value, "ops": [op.to_dict() for op in self.ops]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OpSet":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an operation set

        Returns:
            OpSet instance
        """
        return cls(
            type=OpSetType(data["type"]),
            ops=tuple(Op.from_dict(op) for op in data["ops"]),
        )


@dataclass(frozen=True)
class Drawable:
    """Complete output of one generation call.

    Attributes:
        shape: Descriptive tag (e.g. "rectangle"), None for anonymous shapes
        options: Draw configuration used to produce the operations
        sets: Operation sets in the order they were produced
    """

    shape: str | None
    options: "DrawConfig"
    sets: tuple[OpSet, ...] = field(default_factory=tuple)

    @property
    def op_count(self) -> int:
        """Total number of operations across all sets."""
        return sum(len(op_set) for op_set in self.sets)

    def sets_of_type(self, set_type: OpSetType) -> list[OpSet]:
        """Return the sets painted with the given type, in order."""
        return [op_set for op_set in self.sets if op_set.type is set_type]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with shape, options and operation sets
        """
        return {
            "shape": self.shape,
            "options": self.options.model_dump(),
            "sets": [op_set.to_dict() for op_set in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Drawable":
        """Deserialize from dictionary.

        The configuration is rebuilt from its fields, so it carries a fresh
        randomizer.

        Args:
            data: Dictionary representation of a drawable

        Returns:
            Drawable instance
        """
        from roughsketch.config import DrawConfig

        return cls(
            shape=data["shape"],
            options=DrawConfig(**data["options"]),
            sets=tuple(OpSet.from_dict(s) for s in data["sets"]),
        )
