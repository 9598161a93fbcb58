"""Render options and where they come from.

Precedence, lowest first: built-in defaults, ``TESSERA_*`` environment
variables, inline ``@tessera`` directives, explicit command-line flags.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
import os
from typing import Any, Dict, Mapping, Optional

from ..errors import InvalidArgumentError
from ..picture import Picture, SPACE

logger = logging.getLogger(__name__)

REFLECTIONS = ("horizontal", "vertical")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class RenderOptions:
    position: int = 50
    fill: str = SPACE
    rotate: int = 0
    reflect: Optional[str] = None
    transpose: bool = False
    frame: bool = False
    border: Optional[str] = None
    width: Optional[int] = None
    depth: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RenderOptions":
        env = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}

        position = env.get("TESSERA_POSITION")
        if position is not None:
            try:
                overrides["position"] = int(position)
            except ValueError:
                logger.warning("TESSERA_POSITION=%r is not an integer; ignored", position)

        fill = env.get("TESSERA_FILL")
        if fill is not None:
            if len(fill) == 1:
                overrides["fill"] = fill
            else:
                logger.warning("TESSERA_FILL=%r must be a single character; ignored", fill)

        frame = env.get("TESSERA_FRAME")
        if frame is not None:
            flag = _as_bool(frame)
            if flag is not None:
                overrides["frame"] = flag
            else:
                logger.warning("TESSERA_FRAME=%r is not a boolean; ignored", frame)

        return cls(**overrides)

    def merged(self, flags: Mapping[str, Any]) -> "RenderOptions":
        """A copy with every recognised key of ``flags`` applied."""
        known = {f.name for f in fields(self)}
        overrides: Dict[str, Any] = {}
        for key, value in flags.items():
            if key not in known:
                logger.debug("unknown render option %r ignored", key)
                continue
            if value is None:
                continue
            overrides[key] = _coerce(key, value)
        return replace(self, **overrides)


def _as_bool(value: Any) -> Optional[bool]:
    """``value`` as a flag, or ``None`` if it does not spell one."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return None


def _coerce(key: str, value: Any) -> Any:
    if key in ("position", "rotate", "width", "depth"):
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"{key} must be an integer, got {value!r}") from exc
    if key in ("transpose", "frame"):
        flag = _as_bool(value)
        if flag is None:
            raise InvalidArgumentError(f"{key} must be a boolean, got {value!r}")
        return flag
    if key in ("fill", "border"):
        if isinstance(value, bool) or len(str(value)) != 1:
            raise InvalidArgumentError(f"{key} must be a single character, got {value!r}")
        return str(value)
    if key == "reflect":
        reflect = str(value).lower()
        if reflect not in REFLECTIONS:
            raise InvalidArgumentError(f"reflect must be one of {REFLECTIONS}, got {value!r}")
        return reflect
    return value


def apply_options(picture: Picture, options: RenderOptions) -> Picture:
    """Transform ``picture`` as ``options`` describe.

    Order: transpose, reflect, rotate, fix width, fix depth, border, frame.
    """
    if options.transpose:
        picture = picture.transpose()
    if options.reflect == "horizontal":
        picture = picture.reflect_horizontal()
    elif options.reflect == "vertical":
        picture = picture.reflect_vertical()
    if options.rotate:
        picture = picture.rotate(options.rotate)
    if options.width is not None:
        picture = picture.fix_width(options.width, options.position, options.fill)
    if options.depth is not None:
        picture = picture.fix_depth(options.depth, options.position, options.fill)
    if options.border:
        picture = picture.border(options.border)
    if options.frame:
        picture = picture.frame()
    return picture
