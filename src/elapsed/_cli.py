"""Command-line front end (Typer-based).

Provides :func:`build_cli`, which constructs the ``elapsed`` command::

    elapsed [OPTIONS] COMMAND [ARGS]...

``COMMAND`` runs as a subprocess under :func:`~elapsed.measure_time`.
Its stdout and stderr pass through untouched.  Once it exits, the
formatted duration is printed to stderr (``elapsed = 1.30 s``) and
the child's return code becomes the command's exit code.

Options must come before ``COMMAND``; everything from ``COMMAND`` on
is handed to the child verbatim.  An unrecognised option in front of
``COMMAND`` is a usage error, not a command name.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Annotated, get_args

import typer
from pydantic import ValidationError

from elapsed import __version__
from elapsed._logging import configure_logging
from elapsed._measure import measure_time
from elapsed._settings import DisplaySettings, LoggingSettings, Settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_COMMAND_NOT_EXECUTABLE = 126
EXIT_COMMAND_NOT_FOUND = 127

# ---------------------------------------------------------------------------
# Allowed values (extracted from the settings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)
_VALID_ALIGNMENTS: tuple[str, ...] = get_args(
    DisplaySettings.model_fields["align"].annotation,
)

_NAME = "elapsed"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{_NAME} v{__version__}")
        raise typer.Exit()


def _exit_code(returncode: int) -> int:
    """Map a subprocess return code to a shell-style exit status."""
    if returncode < 0:
        # Killed by a signal: mirror the shell's 128 + signum.
        return 128 + abs(returncode)
    return returncode


def build_cli() -> typer.Typer:
    """Construct the ``elapsed`` Typer app.

    Returns:
        A configured :class:`typer.Typer` ready to invoke.
    """
    cli = typer.Typer(
        help=f"{_NAME} v{__version__}: run a command and print how long it took.",
        add_completion=False,
    )

    @cli.command(
        context_settings={
            "allow_interspersed_args": False,
            "ignore_unknown_options": True,
        },
    )
    def run(
        command: Annotated[
            list[str],
            typer.Argument(help="Command to run, followed by its arguments."),
        ],
        version_flag: Annotated[
            bool | None,
            typer.Option(
                "--version",
                is_eager=True,
                callback=_version_callback,
                help="Show version and exit.",
            ),
        ] = None,
        width: Annotated[
            int | None,
            typer.Option("--width", min=0, help="Minimum field width."),
        ] = None,
        align: Annotated[
            str | None,
            typer.Option("--align", help="Alignment: left, right or center."),
        ] = None,
        fill: Annotated[
            str | None,
            typer.Option("--fill", help="Single padding character."),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
    ) -> None:
        # -- validate enum-like options -------------------------------------
        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )

        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )

        if align is not None and align.lower() not in _VALID_ALIGNMENTS:
            raise typer.BadParameter(
                f"Invalid alignment '{align}'. "
                f"Choose from: {', '.join(_VALID_ALIGNMENTS)}",
                param_hint="'--align'",
            )

        if fill is not None and len(fill) != 1:
            raise typer.BadParameter(
                f"Fill must be a single character, got '{fill}'.",
                param_hint="'--fill'",
            )

        # Unknown options land in COMMAND because of ignore_unknown_options.
        if command[0].startswith("-"):
            raise typer.BadParameter(
                f"No such option: {command[0]}",
                param_hint="'COMMAND'",
            )

        # -- build settings -------------------------------------------------
        try:
            settings = Settings(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        # -- apply CLI overrides --------------------------------------------
        if log_level is not None:
            settings.logging = settings.logging.model_copy(
                update={"level": log_level.upper()},
            )

        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format.lower()},
            )

        display_overrides: dict[str, object] = {}
        if width is not None:
            display_overrides["width"] = width
        if align is not None:
            display_overrides["align"] = align.lower()
        if fill is not None:
            display_overrides["fill"] = fill
        if display_overrides:
            settings.display = settings.display.model_copy(update=display_overrides)

        configure_logging(settings.logging, service=_NAME, version=__version__)

        # -- run and measure ------------------------------------------------
        logger.info("Running %s", shlex.join(command))
        try:
            duration, completed = measure_time(
                lambda: subprocess.run(command, check=False),
            )
        except FileNotFoundError:
            logger.error("Command not found: %s", command[0])
            raise SystemExit(EXIT_COMMAND_NOT_FOUND) from None
        except PermissionError:
            logger.error("Command not executable: %s", command[0])
            raise SystemExit(EXIT_COMMAND_NOT_EXECUTABLE) from None

        if completed.returncode < 0:
            logger.warning(
                "%s terminated by signal %d", command[0], -completed.returncode
            )
        logger.info(
            "%s exited with %d after %s", command[0], completed.returncode, duration
        )

        typer.echo(
            f"elapsed = {format(duration, settings.display.format_spec())}",
            err=True,
        )
        raise typer.Exit(_exit_code(completed.returncode))

    return cli


def main() -> None:
    """Console-script entry point."""
    build_cli()()
