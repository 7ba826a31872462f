"""
CLI for barrelgen.

Provides the command-line interface for generating barrel files for the
current directory or for the current and nested directories.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.syntax import Syntax

from barrelgen.cli.picker import pick_folder
from barrelgen.cli.ui import render_error, render_info, render_success, render_written_files
from barrelgen.core.config import BarrelConfig, LoggingConfig, load_config
from barrelgen.core.errors import BarrelGeneratorError
from barrelgen.services import BarrelService

logger = logging.getLogger(__name__)

# Initialize Rich Console
console = Console()

app = typer.Typer(
    name="barrelgen",
    help="Generate barrel files that export every source file of a directory",
    add_completion=False,
)

PathArgument = typer.Argument(
    None,
    help="Directory to generate the barrel file for (prompts when omitted)",
)
WorkspaceOption = typer.Option(
    None, "--workspace", "-w", help="Workspace root (defaults to the current directory)"
)
ConfigOption = typer.Option(
    None, "--config", "-c", help="Configuration file (.yaml, .yml or .json)"
)
ExcludeFreezedOption = typer.Option(
    None, "--exclude-freezed/--include-freezed", help="Skip *.freezed files"
)
ExcludeGeneratedOption = typer.Option(
    None, "--exclude-generated/--include-generated", help="Skip *.g files"
)
ExtensionOption = typer.Option(
    None, "--extension", "-e", help="Source file extension (default: .dart)"
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


def setup_logging(logging_config: LoggingConfig, verbose: bool = False) -> None:
    """Configure the root logger from the logging section of the config."""
    level = logging.DEBUG if verbose else getattr(
        logging, logging_config.level.upper(), logging.WARNING
    )
    logging.basicConfig(level=level, format=logging_config.format, force=True)


def get_config(
    workspace: Path,
    config_path: Optional[Path] = None,
    exclude_freezed: Optional[bool] = None,
    exclude_generated: Optional[bool] = None,
    extension: Optional[str] = None,
) -> BarrelConfig:
    """
    Load the effective configuration for one command invocation.

    Precedence, lowest first: packaged defaults, workspace or explicit config
    file, BARRELGEN_* environment variables, command-line flags.
    """
    env_file = workspace / ".env"
    if env_file.is_file():
        load_dotenv(env_file)
    cfg = load_config(config_path=config_path, workspace_root=workspace)

    if exclude_freezed is not None:
        cfg.barrel.exclude_freezed = exclude_freezed
    if exclude_generated is not None:
        cfg.barrel.exclude_generated = exclude_generated
    if extension:
        cfg.barrel.extension = extension if extension.startswith(".") else f".{extension}"

    return cfg


def _load_config_or_exit(
    workspace: Path,
    config_path: Optional[Path],
    exclude_freezed: Optional[bool],
    exclude_generated: Optional[bool],
    extension: Optional[str],
) -> BarrelConfig:
    try:
        return get_config(workspace, config_path, exclude_freezed, exclude_generated, extension)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        render_error(f"Invalid configuration: {e}", console)
        raise typer.Exit(1)


def _run(
    path: Optional[Path],
    recursive: bool,
    workspace: Optional[Path],
    config_path: Optional[Path],
    exclude_freezed: Optional[bool],
    exclude_generated: Optional[bool],
    extension: Optional[str],
    verbose: bool,
) -> None:
    workspace_root = (workspace or Path.cwd()).resolve()
    cfg = _load_config_or_exit(
        workspace_root, config_path, exclude_freezed, exclude_generated, extension
    )
    setup_logging(cfg.logging, verbose)
    logger.debug(f"Workspace root: {workspace_root}")

    service = BarrelService(
        workspace_root=workspace_root,
        config=cfg.barrel,
        picker=pick_folder,
    )

    try:
        outcome = service.validate_and_generate(path, recursive=recursive)
    except BarrelGeneratorError as e:
        render_error(str(e), console)
        raise typer.Exit(1)

    if outcome is None:
        render_info("No folder selected, nothing generated.", console)
        return

    if recursive:
        render_written_files(outcome.written_files, outcome.target_directory, console)
        render_success(f"Generated files! {outcome.barrel_path}", console)
    else:
        render_success(f"Generated file! {outcome.barrel_path}", console)


@app.command()
def current(
    path: Optional[Path] = PathArgument,
    workspace: Optional[Path] = WorkspaceOption,
    config_path: Optional[Path] = ConfigOption,
    exclude_freezed: Optional[bool] = ExcludeFreezedOption,
    exclude_generated: Optional[bool] = ExcludeGeneratedOption,
    extension: Optional[str] = ExtensionOption,
    verbose: bool = VerboseOption,
):
    """Generate the barrel file for a directory."""
    _run(
        path,
        False,
        workspace,
        config_path,
        exclude_freezed,
        exclude_generated,
        extension,
        verbose,
    )


@app.command()
def nested(
    path: Optional[Path] = PathArgument,
    workspace: Optional[Path] = WorkspaceOption,
    config_path: Optional[Path] = ConfigOption,
    exclude_freezed: Optional[bool] = ExcludeFreezedOption,
    exclude_generated: Optional[bool] = ExcludeGeneratedOption,
    extension: Optional[str] = ExtensionOption,
    verbose: bool = VerboseOption,
):
    """Generate barrel files for a directory and its nested directories."""
    _run(
        path,
        True,
        workspace,
        config_path,
        exclude_freezed,
        exclude_generated,
        extension,
        verbose,
    )


@app.command("config")
def show_config(
    workspace: Optional[Path] = WorkspaceOption,
    config_path: Optional[Path] = ConfigOption,
    write: Optional[Path] = typer.Option(
        None, "--write", help="Save the effective configuration (.yaml, .yml or .json)"
    ),
):
    """Show the effective configuration, or save it with --write."""
    workspace_root = (workspace or Path.cwd()).resolve()
    cfg = _load_config_or_exit(workspace_root, config_path, None, None, None)

    if write is None:
        console.print(Syntax(cfg.to_yaml(), "yaml", theme="monokai"))
        return

    try:
        cfg.save(write)
    except (OSError, ValueError) as e:
        render_error(f"Could not save configuration: {e}", console)
        raise typer.Exit(1)
    render_success(f"Saved configuration to {write}", console)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
