"""
Module: units_tree.config

Purpose:
    Configuration dataclass for building a units tree from a backend
    payload. Immutable configuration with validation on construction.

Key Classes:
    - UnitsTreeConfig: Request filter plus validation mode

Dependencies:
    - dataclasses (std)
    - curriculum_toolkit.core.models.grades: Grade

Used By:
    - units_tree.controller: build_units_tree()
    - curriculum_toolkit.cli
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from curriculum_toolkit.core.models.grades import Grade


@dataclass(frozen=True)
class UnitsTreeConfig:
    """
    Configuration for building a units tree (immutable).

    Attributes:
        grade: Grade the tree was requested for (None = all grades).
            Accepts Grade, "1"-"3" or 1-3; normalized to Grade.
        include_problems: Whether the payload was fetched with problems.
            Controls whether stats carry total_problems_count.
        strict: Validate the payload with the JSON schema before
            converting. Off by default: bad nodes are dropped instead.

    Example:
        >>> config = UnitsTreeConfig(grade=2, include_problems=True)
        >>> config.grade
        <Grade.SECOND: '2'>
        >>> config.cache_key
        ('2', True)
    """

    grade: Optional[Union[Grade, str, int]] = None
    include_problems: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.grade is not None:
            # Grade.parse raises ValueError for anything outside 1-3
            object.__setattr__(self, "grade", Grade.parse(self.grade))
        if not isinstance(self.include_problems, bool):
            raise ValueError(f"include_problems must be a bool: {self.include_problems!r}")
        if not isinstance(self.strict, bool):
            raise ValueError(f"strict must be a bool: {self.strict!r}")

    @property
    def cache_key(self) -> tuple[Optional[str], bool]:
        """
        Key a caller can cache responses under.

        Returns:
            Tuple of (grade value or None, include_problems)
        """
        return (str(self.grade) if self.grade is not None else None, self.include_problems)
