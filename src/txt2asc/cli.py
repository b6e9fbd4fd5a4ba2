"""Command-line interface for txt2asc."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from txt2asc import __version__
from txt2asc.capture import is_plaintext, output_name, read_capture, write_asc
from txt2asc.config import ConverterConfig, load_config
from txt2asc.converter import convert
from txt2asc.exceptions import Txt2AscError
from txt2asc.visualization.console import ConsoleVisualizer, ConvertedFile


console = Console()

DATE_FORMATS = ["%Y-%m-%d"]


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config(config_path: Optional[str]) -> ConverterConfig:
    try:
        return load_config(config_path)
    except Txt2AscError as e:
        raise click.ClickException(str(e)) from e


def _base_date(value: Optional[datetime]) -> date:
    return value.date() if value is not None else date.today()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log conversion progress")
@click.option("--debug", is_flag=True, help="Log skipped lines and decoding details")
def main(verbose: bool, debug: bool) -> None:
    """txt2asc - convert CAN analyzer text exports to Vector ASC logs."""
    _configure_logging(verbose, debug)


@main.command("convert")
@click.argument("inputs", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--date", "-d", "log_date", type=click.DateTime(formats=DATE_FORMATS), help="Calendar date of the capture (default: today)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file (single input only)")
@click.option("--output-dir", type=click.Path(file_okay=False), help="Directory for generated .asc files")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON configuration file")
@click.option("--preview/--no-preview", default=False, help="Show input and output previews")
@click.option("--force", is_flag=True, help="Accept inputs without a .txt extension")
@click.pass_context
def convert_command(
    ctx: click.Context,
    inputs: tuple[str, ...],
    log_date: Optional[datetime],
    output: Optional[str],
    output_dir: Optional[str],
    config_path: Optional[str],
    preview: bool,
    force: bool,
) -> None:
    """Convert one or more capture exports to .asc files."""
    if output and len(inputs) > 1:
        raise click.UsageError("--output can only be used with a single input")
    
    config = _load_config(config_path)
    base_date = _base_date(log_date)
    target_dir = Path(output_dir) if output_dir else config.output_dir
    visualizer = ConsoleVisualizer(console)
    converted: list[ConvertedFile] = []
    
    for name in inputs:
        source = Path(name)
        if not (force or is_plaintext(source)):
            converted.append(ConvertedFile(source, None, 0, 0, error="not a .txt file"))
            continue
        
        try:
            text = read_capture(source, config.encodings)
            result = convert(text, base_date, config)
            
            if output:
                destination = Path(output)
            else:
                destination = (target_dir or source.parent) / output_name(source.name)
            write_asc(destination, result.asc, config.output_encoding)
        except Txt2AscError as e:
            converted.append(ConvertedFile(source, None, 0, 0, error=str(e)))
            continue
        
        converted.append(ConvertedFile(
            source,
            destination,
            result.frame_count,
            result.diagnostics.skipped,
        ))
        
        if preview:
            visualizer.print_previews(result, source.name, destination.name)
    
    visualizer.print_summary_table(converted)
    
    if any(item.error for item in converted):
        ctx.exit(1)


@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--date", "-d", "log_date", type=click.DateTime(formats=DATE_FORMATS), help="Calendar date of the capture (default: today)")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON configuration file")
def preview(input_file: str, log_date: Optional[datetime], config_path: Optional[str]) -> None:
    """Show what a capture converts to without writing anything."""
    config = _load_config(config_path)
    source = Path(input_file)
    
    try:
        text = read_capture(source, config.encodings)
        result = convert(text, _base_date(log_date), config)
    except Txt2AscError as e:
        raise click.ClickException(str(e)) from e
    
    visualizer = ConsoleVisualizer(console)
    visualizer.print_previews(result, source.name, output_name(source.name))
    visualizer.print_diagnostics(result.diagnostics)


if __name__ == "__main__":
    main()
