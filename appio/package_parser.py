# ================================
# file: appio/package_parser.py
# ================================
"""
Update package parsing utilities
Handles decoding of robot update packages from dicts or JSON lines
"""

from __future__ import annotations
from typing import Optional, Iterable, Iterator, Mapping
import json

from core.errors import PackageFormatError
from core.types import UpdatePackage

# wire key -> UpdatePackage attribute
_INT_FIELDS = {
    "direction": "direction",
    "positionUpdate": "position_update",
    "floor": "floor",
    "walls": "walls",
    "victim": "victim",
}


def _as_int(key: str, value) -> int:
    if isinstance(value, bool):
        raise PackageFormatError(f"Field '{key}' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise PackageFormatError(f"Field '{key}' must be an integer, got {value!r}")


def package_from_dict(data: Mapping) -> UpdatePackage:
    """Build an UpdatePackage from wire keys.
    Expected format, all keys but 'id' optional:
      {"id": 3, "direction": 1, "positionUpdate": 1, "floor": 0,
       "walls": 9, "victim": 100, "ramp": 15.0}
    Unknown keys are ignored; null values count as absent.
    """
    if not isinstance(data, Mapping):
        raise PackageFormatError(f"Package must be a mapping, got {type(data).__name__}")
    if data.get("id") is None:
        raise PackageFormatError("Package is missing its 'id'")

    fields = {"id": _as_int("id", data["id"])}
    for key, attr in _INT_FIELDS.items():
        if data.get(key) is not None:
            fields[attr] = _as_int(key, data[key])

    ramp = data.get("ramp")
    if ramp is not None:
        if isinstance(ramp, bool) or not isinstance(ramp, (int, float)):
            raise PackageFormatError(f"Field 'ramp' must be numeric, got {ramp!r}")
        fields["ramp"] = float(ramp)

    return UpdatePackage(**fields)


def parse_package_line(line: str) -> Optional[UpdatePackage]:
    """Parse one JSON line. Returns None for blank lines."""
    line = line.strip()
    if not line:
        return None
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise PackageFormatError(f"Invalid package JSON: {e}") from e
    return package_from_dict(data)


def iter_packages(lines: Iterable[str]) -> Iterator[UpdatePackage]:
    for line in lines:
        package = parse_package_line(line)
        if package is not None:
            yield package
