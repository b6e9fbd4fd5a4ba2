"""Console-based visualization using Rich."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from txt2asc.converter import ConversionResult
from txt2asc.parser.line_parser import ParseDiagnostics


@dataclass
class ConvertedFile:
    """One row of a batch conversion summary."""
    
    source: Path
    output: Optional[Path]
    frame_count: int
    skipped: int
    error: Optional[str] = None


class ConsoleVisualizer:
    """Renders conversion previews and summaries to the console."""
    
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
    
    def print_previews(
        self,
        result: ConversionResult,
        input_name: str = "Input",
        output_name: str = "Output",
    ) -> None:
        """Print the input and output previews side by side."""
        grid = Table.grid(expand=True, padding=(0, 1))
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_row(
            Panel(Text(result.input_preview or "(empty)"), title=input_name),
            Panel(Text(result.output_preview), title=output_name),
        )
        self.console.print(grid)
    
    def print_diagnostics(self, diagnostics: ParseDiagnostics) -> None:
        """Print line counters for a parse."""
        panel = Panel(
            f"Lines Read: {diagnostics.lines_seen}\n"
            f"Frames: {diagnostics.records}\n"
            f"Header Lines: {diagnostics.header_lines}\n"
            f"No Sequence Number: {diagnostics.bad_sequence_lines}\n"
            f"Too Few Columns: {diagnostics.short_lines}\n"
            f"Malformed: {diagnostics.malformed_lines}",
            title="Parse Summary",
        )
        self.console.print(panel)
    
    def print_summary_table(self, files: list[ConvertedFile]) -> None:
        """Print a table of converted files."""
        table = Table(title="Conversion Summary")
        
        table.add_column("Input", style="cyan")
        table.add_column("Output")
        table.add_column("Frames", justify="right")
        table.add_column("Skipped", justify="right")
        table.add_column("Status")
        
        for item in files:
            status = Text(item.error, style="red") if item.error else Text("ok", style="green")
            table.add_row(
                str(item.source),
                str(item.output) if item.output else "-",
                str(item.frame_count),
                str(item.skipped),
                status,
            )
        
        self.console.print(table)
