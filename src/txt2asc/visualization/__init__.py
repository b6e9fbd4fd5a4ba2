"""Visualization components."""

from txt2asc.visualization.console import ConsoleVisualizer, ConvertedFile

__all__ = ["ConsoleVisualizer", "ConvertedFile"]
