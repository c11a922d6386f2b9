"""Core data models for class2css."""

from .entities import (
    BuildResult,
    CacheStats,
    ClassificationResult,
    ClassToken,
    Diagnostic,
    FileEvent,
    MergedScanState,
    ResolvedDeclaration,
    ScanReport,
    StatusSnapshot,
)
from .rules import LiteralDeclaration, PropertyList, PropertyMapping, RuleMapping, SingleProperty

__all__ = [
    "BuildResult",
    "CacheStats",
    "ClassToken",
    "ClassificationResult",
    "Diagnostic",
    "FileEvent",
    "LiteralDeclaration",
    "MergedScanState",
    "PropertyList",
    "PropertyMapping",
    "ResolvedDeclaration",
    "RuleMapping",
    "ScanReport",
    "SingleProperty",
    "StatusSnapshot",
]
