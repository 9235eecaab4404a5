"""
go-updater — CLI entrypoint.

Usage:
    go-updater --help
    go-updater install [--version go1.25.1] [--dry-run] [--system]
    go-updater status
    python -m goupdater.main install --dry-run
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from goupdater import __version__
from goupdater.core.observability.logging_config import LogFileError, setup_logging

_PREFIX = "[go-updater]"


def _say(msg: str) -> None:
    click.echo(f"{_PREFIX} {msg}")


def _warn(msg: str) -> None:
    click.secho(f"{_PREFIX}[WARN] {msg}", fg="yellow")


def _fail(context: str, err: BaseException) -> None:
    click.secho(f"{_PREFIX}[ERROR] {context}: {err}", fg="red", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="go-updater")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to config.yml (default: $GOUP_CONFIG or ~/.config/go-updater/config.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """go-updater — install or upgrade Go under /usr/local/go."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("GOUP_LOG_LEVEL", "WARNING")

    try:
        setup_logging(
            level=level,
            log_file=os.environ.get("GOUP_LOG_FILE"),
            log_file_level=os.environ.get("GOUP_LOG_FILE_LEVEL"),
        )
    except LogFileError as e:
        _fail("open log file", e)


def _load_config(ctx: click.Context):
    from goupdater.core.config.loader import ConfigError, load_config

    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        _fail("load config", e)


@cli.command()
@click.option(
    "--version",
    "version",
    default="",
    help="Go version to install, e.g. 'go1.26.0'. If empty, the latest version is used.",
)
@click.option("--dry-run", is_flag=True, help="Only print actions without executing them.")
@click.option(
    "--no-path-update",
    is_flag=True,
    default=None,
    help="Do not modify profile files to add /usr/local/go/bin to PATH.",
)
@click.option(
    "--system",
    "system_path",
    is_flag=True,
    default=None,
    help="Also add PATH entry system-wide under /etc/profile.d or /etc/paths.d (requires sudo).",
)
@click.option(
    "--download-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to place the downloaded archive (defaults to system temp dir).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install(
    ctx: click.Context,
    version: str,
    dry_run: bool,
    no_path_update: bool | None,
    system_path: bool | None,
    download_dir: str | None,
    as_json: bool,
) -> None:
    """Download and install a Go release, then put it on PATH."""
    from goupdater.core.context import detect_execution_context
    from goupdater.core.services.go_install import InstallOptions, UpdaterError, run_install

    config = _load_config(ctx)
    dl_dir = download_dir or config.download_dir
    options = InstallOptions(
        version=version,
        dry_run=dry_run,
        no_path_update=config.no_path_update if no_path_update is None else no_path_update,
        system_path=config.system_path if system_path is None else system_path,
        download_dir=Path(dl_dir).expanduser() if dl_dir else None,
        download_host=config.download_host,
        metadata_timeout=config.metadata_timeout,
    )

    quiet = as_json or ctx.obj.get("quiet", False)
    try:
        exec_ctx = detect_execution_context()
        result = run_install(
            options,
            exec_ctx,
            on_progress=None if quiet else _say,
            on_warning=None if as_json else _warn,
        )
    except (UpdaterError, OSError) as e:
        _fail(getattr(e, "step", "") or "install", e)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.status == "planned":
        click.echo("Plan (dry-run):")
        for item in result.plan:
            click.echo(f"- {item}")
        return

    if result.status == "installed":
        click.echo(result.verify_output, nl=not result.verify_output.endswith("\n"))
        if not quiet:
            _say(
                "Note: You may need to start a new shell session for PATH changes "
                f"to take effect, or run: 'source {result.source_hint}'"
            )


@cli.command()
@click.option("--offline", is_flag=True, help="Skip fetching the latest release.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, offline: bool, as_json: bool) -> None:
    """Show the installed and latest Go versions."""
    from goupdater.core.context import detect_execution_context
    from goupdater.core.services.go_install import (
        NetworkError,
        UnsupportedPlatformError,
        VersionNotFoundError,
        detect_installed_version,
        fetch_latest_version,
        resolve_target,
    )

    config = _load_config(ctx)
    try:
        exec_ctx = detect_execution_context()
    except OSError as e:
        _fail("status", e)

    try:
        installed: str | None = detect_installed_version()
    except VersionNotFoundError:
        installed = None

    latest: str | None = None
    latest_error = ""
    if not offline:
        try:
            latest = fetch_latest_version(
                config.download_host, timeout=config.metadata_timeout,
            )
        except NetworkError as e:
            latest_error = str(e)

    try:
        goos, goarch = resolve_target(exec_ctx.goos, exec_ctx.goarch)
        platform_label = f"{goos}/{goarch}"
        supported = True
    except UnsupportedPlatformError:
        platform_label = f"{exec_ctx.goos}/{exec_ctx.goarch}"
        supported = False

    data = {
        "installed": installed,
        "latest": latest,
        "up_to_date": bool(installed and latest and installed == latest),
        "platform": platform_label,
        "supported": supported,
        "privileged": exec_ctx.is_root,
        "sudo": exec_ctx.sudo_path,
    }
    if latest_error:
        data["latest_error"] = latest_error

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Installed: {installed or 'not found'}")
    if offline:
        click.echo("Latest:    (skipped)")
    else:
        click.echo(f"Latest:    {latest or 'unknown'}")
        if latest_error:
            _warn(latest_error)
    marker = "" if supported else " (unsupported)"
    click.echo(f"Platform:  {platform_label}{marker}")
    if data["up_to_date"]:
        click.secho("✅ Go is up to date", fg="green")
    elif installed and latest:
        click.secho(f"⬆️  Update available: {installed} → {latest}", fg="yellow")


@cli.command()
@click.argument("text")
def normalize(text: str) -> None:
    """Print the normalized version token for TEXT."""
    from goupdater.core.services.go_install import normalize_version

    click.echo(normalize_version(text))


def main() -> None:
    """Console-script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
