"""
Module: grades

Purpose:
    Provides the Grade enum for the three supported school years and a
    tolerant parser for the values the backend sends (ints, strings, null).

Key Functions:
    - Grade.parse(value): Normalize 1 / "1" / Grade.FIRST to Grade.FIRST
    - Grade.display_name: Human-readable label

Dependencies:
    - enum (std)

Used By:
    - core.models.nodes.Unit
    - units_tree.config.UnitsTreeConfig
    - units_tree.loading.converter
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Grade(str, Enum):
    """School year a unit is taught in."""
    FIRST = "1"
    SECOND = "2"
    THIRD = "3"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Label like "Grade 1"."""
        return f"Grade {self.value}"

    @classmethod
    def parse(cls, value: Any) -> Grade:
        """
        Normalize a raw grade value.

        Args:
            value: Grade instance, int (1-3) or digit string ("1"-"3")

        Returns:
            Matching Grade

        Raises:
            ValueError: If value is None, a bool, or outside 1-3

        Example:
            >>> Grade.parse(2)
            <Grade.SECOND: '2'>
            >>> Grade.parse(" 3 ")
            <Grade.THIRD: '3'>
        """
        if isinstance(value, cls):
            return value
        if value is None or isinstance(value, bool):
            raise ValueError(f"Invalid grade: {value!r}")
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        try:
            return cls(str(value).strip())
        except ValueError:
            raise ValueError(f"Invalid grade: {value!r} (must be 1-3)") from None


SUPPORTED_GRADES: tuple[Grade, ...] = tuple(Grade)
