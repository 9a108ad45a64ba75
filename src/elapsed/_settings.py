"""Configuration via pydantic-settings.

Configuration is loaded from ``ELAPSED_``-prefixed environment
variables and/or a ``.env`` file.  Nested models use ``__`` as the
delimiter in env var names, e.g. ``ELAPSED_DISPLAY__WIDTH=12``.

The schema covers two concerns:

* **Logging** — level, format, optional file sink, rotation.
* **Display** — padding applied when the ``elapsed`` command prints
  a duration.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings; nested via composition)
# -------------------------------------------------------------------

_ALIGN_SYMBOLS: dict[str, str] = {"left": "<", "right": ">", "center": "^"}


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).  When
    ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"text"`` (default) — human-readable timestamped lines for
      terminal use.
    - ``"json"`` — structured JSON lines for log aggregators.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description=(
            "Log output format. "
            "'json' emits structured JSON lines; "
            "'text' emits human-readable timestamped lines."
        ),
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class DisplaySettings(BaseModel):
    """Field layout for printed durations.

    Environment variables (with ``__`` nesting)::

        ELAPSED_DISPLAY__WIDTH=20
        ELAPSED_DISPLAY__ALIGN=center
        ELAPSED_DISPLAY__FILL=.
    """

    width: Annotated[int, Field(ge=0)] = Field(
        default=0,
        description="Minimum field width. 0 disables padding.",
    )
    align: Literal["left", "right", "center"] = Field(
        default="right",
        description="Alignment inside the field when padding applies.",
    )
    fill: Annotated[str, Field(min_length=1, max_length=1)] = Field(
        default=" ",
        description="Single padding character.",
    )

    def format_spec(self) -> str:
        """Build the ``[[fill]align][width]`` spec for :func:`format`.

        Returns ``""`` when ``width`` is 0.
        """
        if self.width == 0:
            return ""
        return f"{self.fill}{_ALIGN_SYMBOLS[self.align]}{self.width}"


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for elapsed.

    Loaded from ``ELAPSED_``-prefixed environment variables with the
    nested delimiter ``__`` and an optional ``.env`` file in the
    working directory.

    Example ``.env``::

        ELAPSED_LOGGING__LEVEL=DEBUG
        ELAPSED_LOGGING__FORMAT=json
        ELAPSED_DISPLAY__WIDTH=12
    """

    model_config = SettingsConfigDict(
        env_prefix="ELAPSED_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    """``extra="ignore"`` because a shared ``.env`` file commonly holds
    variables for other tools as well."""

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
    display: DisplaySettings = Field(
        default_factory=DisplaySettings,
        description="Duration display settings.",
    )
