"""Unit tests for elapsed._settings — configuration models.

Test Techniques Used:
    - Specification-based Testing: Default values and field
      constraints
    - Boundary Value Analysis: Width and fill length limits
    - Environment Override: monkeypatch for env var injection
    - Validation Error: pydantic constraint violations
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from elapsed._settings import DisplaySettings, LoggingSettings, Settings


class TestLoggingSettingsDefaults:
    """Verify all logging default values.

    Technique: Specification-based Testing.
    """

    def test_level_defaults_to_warning(self) -> None:
        """Only warnings and above by default; the command stays quiet."""
        assert LoggingSettings().level == "WARNING"

    def test_format_defaults_to_text(self) -> None:
        """Human-readable output by default."""
        assert LoggingSettings().format == "text"

    def test_file_defaults_to_none(self) -> None:
        """stderr only by default."""
        assert LoggingSettings().file is None

    def test_rotation_defaults(self) -> None:
        """10 MB files, three generations."""
        s = LoggingSettings()
        assert s.max_file_size_mb == 10
        assert s.backup_count == 3


class TestLoggingSettingsValidation:
    """Field constraint validation for LoggingSettings.

    Technique: Validation Error.
    """

    def test_rejects_unknown_level(self) -> None:
        """Only the five standard level names are accepted."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="VERBOSE")  # type: ignore[arg-type]

    def test_rejects_unknown_format(self) -> None:
        """Only json and text are accepted."""
        with pytest.raises(ValidationError):
            LoggingSettings(format="xml")  # type: ignore[arg-type]

    def test_rejects_zero_file_size(self) -> None:
        """Rotation size must be at least 1 MB."""
        with pytest.raises(ValidationError):
            LoggingSettings(max_file_size_mb=0)

    def test_rejects_negative_backup_count(self) -> None:
        """backup_count cannot be negative."""
        with pytest.raises(ValidationError):
            LoggingSettings(backup_count=-1)


class TestDisplaySettings:
    """DisplaySettings defaults, validation and format_spec().

    Technique: Boundary Value Analysis.
    """

    def test_defaults(self) -> None:
        """No padding, right-aligned, space fill."""
        s = DisplaySettings()
        assert s.width == 0
        assert s.align == "right"
        assert s.fill == " "

    def test_zero_width_has_empty_spec(self) -> None:
        """Width 0 disables padding entirely."""
        assert DisplaySettings(align="center", fill="*").format_spec() == ""

    @pytest.mark.parametrize(
        ("align", "expected"),
        [
            ("left", " <20"),
            ("right", " >20"),
            ("center", " ^20"),
        ],
    )
    def test_spec_per_alignment(self, align: str, expected: str) -> None:
        """Each alignment name maps to its format-spec symbol."""
        s = DisplaySettings(width=20, align=align)  # type: ignore[arg-type]
        assert s.format_spec() == expected

    def test_custom_fill_in_spec(self) -> None:
        """The fill character leads the spec."""
        assert DisplaySettings(width=8, fill=".").format_spec() == ".>8"

    def test_rejects_negative_width(self) -> None:
        """Width cannot be negative."""
        with pytest.raises(ValidationError):
            DisplaySettings(width=-1)

    @pytest.mark.parametrize("fill", ["", "ab"])
    def test_rejects_fill_not_one_char(self, fill: str) -> None:
        """Fill must be exactly one character."""
        with pytest.raises(ValidationError):
            DisplaySettings(fill=fill)

    def test_rejects_unknown_alignment(self) -> None:
        """Only left, right and center are accepted."""
        with pytest.raises(ValidationError):
            DisplaySettings(align="justify")  # type: ignore[arg-type]


class TestSettingsFromEnvironment:
    """Root Settings loading from ELAPSED_* variables and .env files.

    Technique: Environment Override.
    """

    def test_defaults_without_environment(self) -> None:
        """Sub-models fall back to their own defaults."""
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.logging == LoggingSettings()
        assert s.display == DisplaySettings()

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """``__`` separates nested fields."""
        monkeypatch.setenv("ELAPSED_DISPLAY__WIDTH", "12")
        monkeypatch.setenv("ELAPSED_LOGGING__LEVEL", "DEBUG")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.display.width == 12
        assert s.logging.level == "DEBUG"

    def test_unprefixed_variables_ignored(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Variables without the ELAPSED_ prefix are not read."""
        monkeypatch.setenv("DISPLAY__WIDTH", "12")
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.display.width == 0

    def test_invalid_env_value_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Constraint violations from the environment surface as errors."""
        monkeypatch.setenv("ELAPSED_DISPLAY__WIDTH", "-3")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_env_file(self, tmp_path: Path) -> None:
        """Values are read from the given .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "ELAPSED_DISPLAY__ALIGN=center\nOTHER_TOOL_TOKEN=abc\n",
            encoding="utf-8",
        )

        s = Settings(_env_file=env_file)  # type: ignore[call-arg]

        assert s.display.align == "center"
