"""CSS generation, formatting and persistence."""

from .formatter import CssFormatter, CssRule
from .generator import CssGenerator, GeneratedCss
from .sink import FileSystemSink, OutputSink
from .writer import BuildWriter, mirrored_output_path

__all__ = [
    "BuildWriter",
    "CssFormatter",
    "CssGenerator",
    "CssRule",
    "FileSystemSink",
    "GeneratedCss",
    "OutputSink",
    "mirrored_output_path",
]
