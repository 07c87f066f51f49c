"""
Unit Tests for UnitsTreeConfig
"""

import pytest
from dataclasses import FrozenInstanceError

from curriculum_toolkit.core.models import Grade
from curriculum_toolkit.units_tree.config import UnitsTreeConfig


class TestUnitsTreeConfig:
    """Tests for UnitsTreeConfig validation."""

    def test_config_when_defaults_then_all_grades_no_problems(self):
        config = UnitsTreeConfig()

        assert config.grade is None
        assert config.include_problems is False
        assert config.strict is False

    @pytest.mark.parametrize("grade", [2, "2", Grade.SECOND])
    def test_config_when_grade_given_then_normalized(self, grade):
        assert UnitsTreeConfig(grade=grade).grade is Grade.SECOND

    def test_config_when_grade_invalid_then_raises(self):
        with pytest.raises(ValueError, match="Invalid grade"):
            UnitsTreeConfig(grade=5)

    def test_config_when_include_problems_not_bool_then_raises(self):
        with pytest.raises(ValueError, match="include_problems"):
            UnitsTreeConfig(include_problems="yes")

    def test_config_when_strict_not_bool_then_raises(self):
        with pytest.raises(ValueError, match="strict"):
            UnitsTreeConfig(strict=1)

    def test_config_when_assigned_then_frozen(self):
        config = UnitsTreeConfig()

        with pytest.raises(FrozenInstanceError):
            config.strict = True

    def test_cache_key_when_called_then_grade_and_flag(self):
        assert UnitsTreeConfig(grade=1, include_problems=True).cache_key == ("1", True)
        assert UnitsTreeConfig().cache_key == (None, False)
