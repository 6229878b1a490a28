"""Tests for the transpiler models module."""

import dataclasses

import pytest

from agsl2glsl.transpiler.models import TranspileResult, TranspileWarning, WarningKind


class TestTranspileWarning:
    """Tests for the TranspileWarning dataclass."""

    def test_warning_creation(self):
        """Test creating a TranspileWarning instance."""
        # Arrange & Act
        warning = TranspileWarning(WarningKind.DEFINE, "no macros")

        # Assert
        assert warning.kind == WarningKind.DEFINE
        assert warning.message == "no macros"
        assert str(warning) == "no macros"


class TestTranspileResult:
    """Tests for the TranspileResult dataclass."""

    def test_result_defaults(self):
        """Test creating a TranspileResult with only the required fields."""
        # Arrange & Act
        result = TranspileResult(generated_source="void main() {}\n", line_offset=0)

        # Assert
        assert result.warnings == ()
        assert result.image_uniforms == ()
        assert result.uses_manual_mask is False

    def test_result_is_frozen(self):
        """Test that source and offset cannot be changed independently."""
        result = TranspileResult(generated_source="", line_offset=3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.line_offset = 4  # type: ignore
