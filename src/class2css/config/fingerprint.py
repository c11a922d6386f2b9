"""Config fingerprinting for cache invalidation."""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict

from class2css.config.model import Class2CssConfig


def config_fingerprint(config: Class2CssConfig) -> str:
    """Return a stable hash fingerprint over everything that shapes the output."""
    payload = {
        "system": {
            "css_format": config.system.css_format,
            "base_unit": config.system.base_unit,
            "unit_conversion": config.system.unit_conversion,
            "property_units": sorted(config.system.property_units.items()),
            "property_conversion": sorted(config.system.property_conversion.items()),
            "sort_classes": config.system.sort_classes,
            "common_css": config.system.common_css,
        },
        "important": asdict(config.important),
        "rules": sorted((prefix, _mapping_payload(mapping)) for prefix, mapping in config.rules.items()),
        "color_families": sorted(
            (prefix, _mapping_payload(mapping)) for prefix, mapping in config.color_families.items()
        ),
        "colors": sorted(config.colors.items()),
        "static_classes": sorted(
            (name, [list(pair) for pair in literal.declarations]) for name, literal in config.static_classes.items()
        ),
        "breakpoints": sorted(config.breakpoints.items()),
        "states": sorted(config.states.items()),
        "entry": {
            "paths": [path.as_posix() for path in config.entry.paths],
            "file_types": list(config.entry.file_types),
            "class_attributes": list(config.entry.class_attributes),
        },
        "output": {
            "mode": config.output.mode,
            "path": config.output.path.as_posix() if config.output.path else None,
            "file_name": config.output.file_name,
            "file_type": config.output.file_type,
            "write_mode": config.output.write_mode,
        },
        "watch": asdict(config.watch),
        "cache": asdict(config.cache),
    }
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


def _mapping_payload(mapping: object) -> dict[str, object]:
    payload = asdict(mapping)  # type: ignore[call-overload]
    payload["kind"] = type(mapping).__name__
    return payload
