"""File input/output helpers."""

from .files import read_markup
from .text_io import append_text, read_text_if_exists, write_text_atomic

__all__ = ["append_text", "read_markup", "read_text_if_exists", "write_text_atomic"]
