"""Command-line interface for tree-size."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from tree_size.app.runner import ApplicationRunner
from tree_size.core.config import ConfigurationError, MainConfig, load_main_config
from tree_size.core.filesystem import SizeMode, WalkError, WalkReport
from tree_size.utils.formatting import format_elapsed, format_size
from tree_size.utils.logging import configure_logging

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_WALK_ERROR = 2

try:
    __version__ = version("tree-size")
except PackageNotFoundError:
    __version__ = "unknown"


def validate_config_path(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: Path | None,
) -> Path | None:
    """Validate configuration file path.

    Args:
        ctx: Click context (required by Click callback signature)
        param: Click parameter (required by Click callback signature)
        value: Path value to validate

    Returns:
        Validated Path object

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return value

    if value.exists() and value.is_dir():
        raise click.BadParameter("Configuration path must be a file, not a directory")

    valid_extensions = {".yaml", ".yml"}
    if value.suffix.lower() not in valid_extensions:
        extensions_str = ", ".join(sorted(valid_extensions))
        raise click.BadParameter(
            f"Invalid configuration file extension. Supported extensions: {extensions_str}"
        )

    return value


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Returns:
        Normalized log level (uppercase)

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if normalized_value not in valid_levels:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(valid_levels))}'
        )

    return normalized_value


def apply_overrides(
    config: MainConfig,
    *,
    strategy: str | None,
    size_mode: str | None,
    count_directory_sizes: bool | None,
    log_level: str | None,
    no_syslog: bool,
) -> MainConfig:
    """Return a copy of ``config`` with command-line overrides applied."""
    walker_updates: dict[str, object] = {}
    if strategy is not None:
        walker_updates["strategy"] = strategy
    if size_mode is not None:
        walker_updates["size_mode"] = SizeMode(size_mode)
    if count_directory_sizes is not None:
        walker_updates["count_directory_sizes"] = count_directory_sizes

    application_updates: dict[str, object] = {}
    if log_level is not None:
        application_updates["log_level"] = log_level
    if no_syslog:
        application_updates["syslog_enabled"] = False

    return config.model_copy(
        update={
            "walker": config.walker.model_copy(update=walker_updates),
            "application": config.application.model_copy(update=application_updates),
        }
    )


def render_report(report: WalkReport, *, raw_bytes: bool) -> str:
    """Render one walk report as a single output line."""
    size = str(report.total_bytes) if raw_bytes else format_size(report.total_bytes)
    return f"{size}\t{report.root}\t[{report.strategy.value}, {format_elapsed(report.elapsed_seconds)}]"


@click.command()
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--strategy", "-s",
    type=click.Choice(["shallow", "deep", "both"]),
    default=None,
    help="Traversal strategy (default from config: shallow)",
)
@click.option(
    "--size-mode", "-m",
    type=click.Choice([mode.value for mode in SizeMode]),
    default=None,
    help="Measure apparent size or allocated disk usage",
)
@click.option(
    "--count-directory-sizes/--no-count-directory-sizes",
    default=None,
    help="Add the OS-reported size of directory nodes in the deep strategy",
)
@click.option(
    "--config", "-c",
    type=click.Path(path_type=Path),
    default=None,
    callback=validate_config_path,
    help="Configuration file path (.yaml or .yml)",
)
@click.option(
    "--log-level", "-l",
    type=str,
    default=None,
    callback=validate_log_level,
    help="Logging verbosity level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
)
@click.option(
    "--no-syslog",
    is_flag=True,
    help="Disable syslog integration even if enabled in config",
)
@click.option(
    "--bytes", "-b", "raw_bytes",
    is_flag=True,
    help="Print totals as exact byte counts",
)
@click.version_option(version=__version__, prog_name="tree-size")
def cli(
    path: Path,
    strategy: str | None,
    size_mode: str | None,
    count_directory_sizes: bool | None,
    config: Path | None,
    log_level: str | None,
    no_syslog: bool,
    raw_bytes: bool,
) -> None:
    """Compute the total size of the directory tree at PATH.

    Examples:

        # Shallow-recursive walk, human-readable total
        tree-size ~/Documents

        # Compare both strategies with exact byte counts
        tree-size --strategy both --bytes /var/log

        # Allocated blocks instead of apparent sizes
        tree-size --size-mode disk_usage /srv
    """
    try:
        base_config = load_main_config(config) if config is not None else MainConfig()
    except ConfigurationError as exc:
        click.echo(f"Configuration error:\n{exc}", err=True)
        raise SystemExit(EXIT_CONFIG_ERROR) from exc

    settings = apply_overrides(
        base_config,
        strategy=strategy,
        size_mode=size_mode,
        count_directory_sizes=count_directory_sizes,
        log_level=log_level,
        no_syslog=no_syslog,
    )

    configure_logging(
        log_level=settings.application.log_level,
        enable_syslog=settings.application.syslog_enabled,
        enable_console=True,
    )

    runner = ApplicationRunner(settings)
    try:
        reports = runner.run(path)
    except WalkError as exc:
        click.echo(f"Walk failed: {exc}", err=True)
        raise SystemExit(EXIT_WALK_ERROR) from exc

    for report in reports:
        click.echo(render_report(report, raw_bytes=raw_bytes))
