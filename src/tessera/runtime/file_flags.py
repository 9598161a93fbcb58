"""Parse inline render directives embedded in picture text.

Supported directive formats (first 25 lines):
- # @tessera: {"frame": true, "rotate": 1}
- # @tessera: frame=true; rotate=1; fill=.

Values accept booleans, ints, floats, or strings.  Directive lines are not
part of the picture; ``strip_file_flags`` removes them.
"""

from __future__ import annotations

from typing import Any, Dict
import json
import logging
import re

logger = logging.getLogger(__name__)

_MAX_SCAN_LINES = 25
_MARKER = "@tessera"


def _is_directive(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith(("#", "//")) and _MARKER in stripped


def parse_file_flags(source: str) -> Dict[str, Any]:
    flags: Dict[str, Any] = {}
    if not source:
        return flags

    lines = source.split("\n")[:_MAX_SCAN_LINES]
    for line in lines:
        if not _is_directive(line):
            continue

        # Strip leading comment markers
        directive = line.strip()
        for prefix in ("//", "#"):
            if directive.startswith(prefix):
                directive = directive[len(prefix):].strip()
        if directive.lower().startswith(_MARKER):
            directive = directive[len(_MARKER):].strip()
        if directive.startswith(":"):
            directive = directive[1:].strip()

        # JSON object form
        if directive.startswith("{"):
            try:
                parsed = json.loads(directive)
            except json.JSONDecodeError as exc:
                logger.debug("ignoring malformed directive %r: %s", directive, exc)
                continue
            if isinstance(parsed, dict):
                flags.update(parsed)
            continue

        # key=value form (semicolon separated)
        for part in re.split(r";", directive):
            part = part.strip()
            if not part or "=" not in part:
                continue
            key, raw_val = part.split("=", 1)
            flags[key.strip()] = _parse_value(raw_val.strip())

    return flags


def strip_file_flags(source: str) -> str:
    """``source`` without its directive lines."""
    lines = source.split("\n")
    kept = [
        line for index, line in enumerate(lines)
        if not (index < _MAX_SCAN_LINES and _is_directive(line))
    ]
    return "\n".join(kept)


def _parse_value(raw: str) -> Any:
    if not raw:
        return raw
    lowered = raw.lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    # numbers
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        pass
    # quoted string
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ("\"", "'"):
        return raw[1:-1]
    return raw
