"""CLI branding strings."""

from __future__ import annotations

CLI_PROG: str = "class2css"
CLI_DESCRIPTION: str = (
    "Atomic CSS build engine: scans markup for utility class tokens and\n"
    "writes the matching CSS, incrementally, as source files change."
)
STATUS_SUMMARY_TITLE: str = "class2css build status"
