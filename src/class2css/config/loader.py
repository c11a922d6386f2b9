"""Config loading and normalization for class2css builds."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from class2css.config.model import Class2CssConfig
from class2css.constants.cache import (
    DEFAULT_HOT_CAPACITY,
    DEFAULT_HOT_TTL_SECONDS,
    DEFAULT_SWEEP_INTERVAL_SECONDS,
    DEFAULT_WARM_CAPACITY,
    DEFAULT_WARM_TTL_SECONDS,
)
from class2css.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_BASE_UNIT,
    DEFAULT_BREAKPOINTS,
    DEFAULT_CLASS_ATTRIBUTES,
    DEFAULT_CSS_FORMAT,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FILE_TYPES,
    DEFAULT_IMPORTANT_PREFIXES,
    DEFAULT_LOCK_TIMEOUT_MS,
    DEFAULT_OUTPUT_FILE_NAME,
    DEFAULT_OUTPUT_FILE_TYPE,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_SETTLE_MS,
    DEFAULT_STATES,
    DEFAULT_UNIT_CONVERSION,
    MAX_DEBOUNCE_MS,
    MIN_DEBOUNCE_MS,
    OUTPUT_MODE_UNIFILE,
    VALID_CSS_FORMATS,
    VALID_OUTPUT_MODES,
    VALID_WRITE_MODES,
    WRITE_MODE_REWRITE,
)
from class2css.exceptions import ConfigError
from class2css.model.rules import LiteralDeclaration, PropertyList, PropertyMapping, SingleProperty
from class2css.types.config import (
    CacheConfig,
    EntryConfig,
    ImportantFlags,
    OutputConfig,
    SystemConfig,
    WatchConfig,
)

_UNITLESS_MARKER = "-"


def load_config(root: Path, config_path: Path | None = None) -> Class2CssConfig:
    """Load and validate build config from ``class2css.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return Class2CssConfig(root=root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    return parse_config(raw, root=path.parent, source_path=path)


def parse_config(raw: dict[str, Any], *, root: Path, source_path: Path | None = None) -> Class2CssConfig:
    """Normalize an already-parsed config mapping."""
    root = root.resolve()
    system_raw = _ensure_mapping(raw.get("system"), "system")
    important_raw = _ensure_mapping(raw.get("important"), "important")
    entry_raw = _ensure_mapping(raw.get("entry"), "entry")
    output_raw = _ensure_mapping(raw.get("output"), "output")
    watch_raw = _ensure_mapping(raw.get("watch"), "watch")
    cache_raw = _ensure_mapping(raw.get("cache"), "cache")

    rules_raw = _ensure_mapping(raw.get("rules"), "rules")
    rules = {
        str(prefix): _compile_property_mapping(value, f"rules.{prefix}") for prefix, value in rules_raw.items()
    }
    families_raw = _ensure_mapping(raw.get("color_families"), "color_families")
    color_families: dict[str, SingleProperty] = {}
    for prefix, value in families_raw.items():
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"color_families.{prefix} must be a CSS property name")
        color_families[str(prefix)] = SingleProperty(name=value.strip())

    colors = {
        str(alias): str(value).strip()
        for alias, value in _ensure_mapping(raw.get("colors"), "colors").items()
        if str(value).strip()
    }
    static_raw = _ensure_mapping(raw.get("static_classes"), "static_classes")
    static_classes = {
        str(name): _compile_literal(value, f"static_classes.{name}") for name, value in static_raw.items()
    }

    breakpoints_raw = raw.get("breakpoints", DEFAULT_BREAKPOINTS)
    breakpoints = {
        str(name): str(width).strip() for name, width in _ensure_mapping(breakpoints_raw, "breakpoints").items()
    }

    return Class2CssConfig(
        root=root,
        source_path=source_path,
        system=_build_system_config(system_raw, root),
        important=ImportantFlags(
            prefixes=tuple(
                _ensure_string_list(important_raw.get("prefix", list(DEFAULT_IMPORTANT_PREFIXES)), "important.prefix")
            ),
            suffixes=tuple(_ensure_string_list(important_raw.get("suffix", []), "important.suffix")),
            custom=tuple(_ensure_string_list(important_raw.get("custom", []), "important.custom")),
        ),
        rules=rules,
        color_families=color_families,
        colors=colors,
        static_classes=static_classes,
        breakpoints=breakpoints,
        states=_build_states(raw.get("states", DEFAULT_STATES)),
        entry=EntryConfig(
            paths=tuple(
                _resolve_path(item, root) for item in _ensure_string_list(entry_raw.get("paths", []), "entry.paths")
            ),
            file_types=tuple(
                item.lower().lstrip(".")
                for item in _ensure_string_list(entry_raw.get("file_types", list(DEFAULT_FILE_TYPES)), "entry.file_types")
                if item.strip()
            ),
            class_attributes=tuple(
                _ensure_string_list(
                    entry_raw.get("class_attributes", list(DEFAULT_CLASS_ATTRIBUTES)), "entry.class_attributes"
                )
            ),
        ),
        output=_build_output_config(output_raw, root),
        watch=WatchConfig(
            debounce_ms=_ensure_int(
                watch_raw.get("debounce_ms", DEFAULT_DEBOUNCE_MS),
                "watch.debounce_ms",
                minimum=MIN_DEBOUNCE_MS,
                maximum=MAX_DEBOUNCE_MS,
            ),
            settle_ms=_ensure_int(watch_raw.get("settle_ms", DEFAULT_SETTLE_MS), "watch.settle_ms"),
            lock_timeout_ms=_ensure_int(
                watch_raw.get("lock_timeout_ms", DEFAULT_LOCK_TIMEOUT_MS), "watch.lock_timeout_ms"
            ),
            poll_interval_ms=_ensure_int(
                watch_raw.get("poll_interval_ms", DEFAULT_POLL_INTERVAL_MS), "watch.poll_interval_ms", minimum=1
            ),
        ),
        cache=CacheConfig(
            hot_capacity=_ensure_int(cache_raw.get("hot_capacity", DEFAULT_HOT_CAPACITY), "cache.hot_capacity", minimum=1),
            hot_ttl_seconds=_ensure_positive_number(
                cache_raw.get("hot_ttl_seconds", DEFAULT_HOT_TTL_SECONDS), "cache.hot_ttl_seconds"
            ),
            warm_capacity=_ensure_int(
                cache_raw.get("warm_capacity", DEFAULT_WARM_CAPACITY), "cache.warm_capacity", minimum=1
            ),
            warm_ttl_seconds=_ensure_positive_number(
                cache_raw.get("warm_ttl_seconds", DEFAULT_WARM_TTL_SECONDS), "cache.warm_ttl_seconds"
            ),
            sweep_interval_seconds=_ensure_positive_number(
                cache_raw.get("sweep_interval_seconds", DEFAULT_SWEEP_INTERVAL_SECONDS),
                "cache.sweep_interval_seconds",
            ),
        ),
    )


def _build_system_config(raw: dict[str, Any], root: Path) -> SystemConfig:
    css_format = raw.get("css_format", DEFAULT_CSS_FORMAT)
    if not isinstance(css_format, str) or css_format.lower() not in VALID_CSS_FORMATS:
        raise ConfigError(f"system.css_format must be one of {sorted(VALID_CSS_FORMATS)}, got {css_format!r}")

    base_unit = raw.get("base_unit", DEFAULT_BASE_UNIT)
    if not isinstance(base_unit, str):
        raise ConfigError("system.base_unit must be a string")

    unit_conversion = _ensure_positive_number(
        raw.get("unit_conversion", DEFAULT_UNIT_CONVERSION), "system.unit_conversion"
    )

    property_units: dict[str, str] = {}
    for key, unit in _ensure_mapping(raw.get("property_units"), "system.property_units").items():
        unit_text = "" if unit is None else str(unit).strip()
        # "width|height: px" assigns one unit to several properties.
        for prop in str(key).split("|"):
            if prop.strip():
                property_units[prop.strip()] = "" if unit_text == _UNITLESS_MARKER else unit_text

    property_conversion: dict[str, float] = {}
    for key, factor in _ensure_mapping(raw.get("property_conversion"), "system.property_conversion").items():
        for prop in str(key).split("|"):
            if prop.strip():
                property_conversion[prop.strip()] = _ensure_positive_number(
                    factor, f"system.property_conversion.{key}"
                )

    sort_classes = raw.get("sort_classes", False)
    if not isinstance(sort_classes, bool):
        raise ConfigError("system.sort_classes must be a boolean")

    common_css_path: Path | None = None
    common_css = ""
    common_raw = raw.get("common_css")
    if common_raw is not None:
        if not isinstance(common_raw, str):
            raise ConfigError("system.common_css must be a path string")
        common_css_path = _resolve_path(common_raw, root)
        try:
            common_css = common_css_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"system.common_css could not be read: {common_css_path} ({exc})") from exc

    return SystemConfig(
        css_format=css_format.lower(),  # type: ignore[arg-type]
        base_unit=base_unit.strip(),
        unit_conversion=unit_conversion,
        property_units=property_units,
        property_conversion=property_conversion,
        sort_classes=sort_classes,
        common_css_path=common_css_path,
        common_css=common_css,
    )


def _build_output_config(raw: dict[str, Any], root: Path) -> OutputConfig:
    mode = raw.get("mode", OUTPUT_MODE_UNIFILE)
    if mode not in VALID_OUTPUT_MODES:
        raise ConfigError(f"output.mode must be one of {sorted(VALID_OUTPUT_MODES)}, got {mode!r}")
    write_mode = raw.get("write_mode", WRITE_MODE_REWRITE)
    if write_mode not in VALID_WRITE_MODES:
        raise ConfigError(f"output.write_mode must be one of {sorted(VALID_WRITE_MODES)}, got {write_mode!r}")

    path_raw = raw.get("path")
    if path_raw is not None and not isinstance(path_raw, str):
        raise ConfigError("output.path must be a path string")

    file_name = raw.get("file_name", DEFAULT_OUTPUT_FILE_NAME)
    file_type = raw.get("file_type", DEFAULT_OUTPUT_FILE_TYPE)
    if not isinstance(file_name, str) or not file_name.strip():
        raise ConfigError("output.file_name must be a non-empty string")
    if not isinstance(file_type, str) or not file_type.strip():
        raise ConfigError("output.file_type must be a non-empty string")

    return OutputConfig(
        mode=mode,
        path=_resolve_path(path_raw, root) if path_raw else None,
        file_name=file_name.strip(),
        file_type=file_type.strip().lstrip("."),
        write_mode=write_mode,
    )


def _build_states(raw: Any) -> dict[str, str]:
    """Accept a list of state names or a name -> pseudo-class mapping."""
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return {str(name): str(pseudo or name).strip() for name, pseudo in raw.items()}
    names = _ensure_string_list(raw, "states")
    return {name: DEFAULT_STATES.get(name, name) for name in names}


def _compile_property_mapping(value: Any, key_name: str) -> PropertyMapping:
    """Turn a raw rule entry into a ``SingleProperty`` or ``PropertyList``."""
    unit: str | None = None
    skip_conversion = False
    properties: Any = value
    if isinstance(value, dict):
        properties = value.get("properties")
        unit_raw = value.get("unit")
        if unit_raw is not None:
            if not isinstance(unit_raw, str):
                raise ConfigError(f"{key_name}.unit must be a string")
            unit = "" if unit_raw.strip() == _UNITLESS_MARKER else unit_raw.strip()
        skip_raw = value.get("skip_conversion", False)
        if not isinstance(skip_raw, bool):
            raise ConfigError(f"{key_name}.skip_conversion must be a boolean")
        skip_conversion = skip_raw

    if isinstance(properties, str) and properties.strip():
        return SingleProperty(name=properties.strip(), unit=unit, skip_conversion=skip_conversion)
    names = [name.strip() for name in _ensure_string_list(properties, key_name) if name.strip()]
    if not names:
        raise ConfigError(f"{key_name} must name at least one CSS property")
    if len(names) == 1:
        return SingleProperty(name=names[0], unit=unit, skip_conversion=skip_conversion)
    return PropertyList(names=tuple(names), unit=unit, skip_conversion=skip_conversion)


def _compile_literal(value: Any, key_name: str) -> LiteralDeclaration:
    """Parse ``"display: flex; gap: 4px;"`` or a property mapping into pairs."""
    pairs: list[tuple[str, str]] = []
    if isinstance(value, dict):
        pairs = [(str(prop).strip(), str(val).strip()) for prop, val in value.items()]
    elif isinstance(value, str):
        for chunk in value.split(";"):
            if not chunk.strip():
                continue
            prop, sep, val = chunk.partition(":")
            if not sep or not prop.strip() or not val.strip():
                raise ConfigError(f"{key_name} has a malformed declaration: {chunk.strip()!r}")
            pairs.append((prop.strip(), val.strip()))
    else:
        raise ConfigError(f"{key_name} must be a declaration string or mapping")
    if not pairs:
        raise ConfigError(f"{key_name} must contain at least one declaration")
    return LiteralDeclaration(declarations=tuple(pairs))


def _ensure_mapping(value: Any, key_name: str) -> dict[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_int(value: Any, key_name: str, *, minimum: int = 0, maximum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigError(f"{key_name} must be an integer >= {minimum}")
    if maximum is not None and value > maximum:
        raise ConfigError(f"{key_name} must be <= {maximum}")
    return value


def _ensure_positive_number(value: Any, key_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive number")
    return float(value)


def _resolve_path(value: str, root: Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()
