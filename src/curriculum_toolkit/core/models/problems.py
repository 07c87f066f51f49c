"""
Module: problems

Purpose:
    Provides the Problem dataclass - an immutable bank problem attached to
    a curriculum unit - plus the ProblemKind and Difficulty enums and the
    fixed mappings from the backend's question-type and difficulty tags.

Key Functions:
    - ProblemKind.from_question_kind(): MULTIPLE_CHOICE/SUBJECTIVE -> enum
    - Difficulty.from_tag(): "하"/"중"/"상" -> enum
    - Problem.to_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.nodes.Unit
    - units_tree.loading.converter
    - units_tree.view.adapter
    - units_tree.selection.summary
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


# Backend question-type tags
MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
SUBJECTIVE = "SUBJECTIVE"

# Backend difficulty tags (low / mid / high tier)
DIFFICULTY_LOW_TAG = "하"
DIFFICULTY_MEDIUM_TAG = "중"
DIFFICULTY_HIGH_TAG = "상"


class ProblemKind(str, Enum):
    """How a problem is answered."""
    OBJECTIVE = "objective"    # Multiple choice
    SUBJECTIVE = "subjective"  # Free response

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_question_kind(cls, tag: str) -> ProblemKind:
        """
        Map a backend question-type tag.

        Raises:
            ValueError: If tag is not MULTIPLE_CHOICE or SUBJECTIVE
        """
        if tag == MULTIPLE_CHOICE:
            return cls.OBJECTIVE
        if tag == SUBJECTIVE:
            return cls.SUBJECTIVE
        raise ValueError(f"Unknown question kind: {tag!r}")


class Difficulty(str, Enum):
    """Problem difficulty tier."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, tag: str) -> Difficulty:
        """
        Map a backend difficulty tag.

        Raises:
            ValueError: If tag is not one of the three tier tags
        """
        try:
            return _DIFFICULTY_BY_TAG[tag]
        except (KeyError, TypeError):
            raise ValueError(f"Unknown difficulty tag: {tag!r}") from None


_DIFFICULTY_BY_TAG = {
    DIFFICULTY_LOW_TAG: Difficulty.LOW,
    DIFFICULTY_MEDIUM_TAG: Difficulty.MEDIUM,
    DIFFICULTY_HIGH_TAG: Difficulty.HIGH,
}


@dataclass(frozen=True, slots=True)
class Problem:
    """
    Bank problem belonging to a unit (immutable).

    Attributes:
        id: Backend problem identifier
        sequence_number: 1-based position within the owning unit
        title: Display title (the backend preview text)
        content: Problem body (the backend preview text)
        kind: OBJECTIVE or SUBJECTIVE
        difficulty: LOW, MEDIUM or HIGH
        points: Points awarded
        unit_name: Name of the owning unit

    Invariants:
        - sequence_number >= 1
        - points >= 0

    Example:
        >>> p = Problem("p1", 1, "2 + 3 = ?", "2 + 3 = ?",
        ...             ProblemKind.OBJECTIVE, Difficulty.LOW, 5, "Integer addition")
        >>> p.to_dict()["type"]
        'objective'
    """

    id: str
    sequence_number: int
    title: str
    content: str
    kind: ProblemKind
    difficulty: Difficulty
    points: Union[int, float]
    unit_name: str = ""

    def __post_init__(self) -> None:
        """Validate problem on construction."""
        if self.sequence_number < 1:
            raise ValueError(f"sequence_number must be >= 1: {self.sequence_number}")
        if self.points < 0:
            raise ValueError(f"points must be non-negative: {self.points}")

    def to_dict(self) -> dict:
        """Serialize to the camelCase shape used by the dashboard."""
        return {
            "id": self.id,
            "number": self.sequence_number,
            "title": self.title,
            "content": self.content,
            "type": str(self.kind),
            "difficulty": str(self.difficulty),
            "points": self.points,
            "unitName": self.unit_name,
        }

    def __repr__(self) -> str:
        return f"Problem({self.id!r}, #{self.sequence_number}, {self.kind.value}, {self.difficulty.value})"
