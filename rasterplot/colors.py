from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Union

from PIL import ImageColor

from rasterplot.errors import UnrecognizedColorError


RGBA = tuple[int, int, int, int]

TRANSPARENT = 0x00000000
BLACK = 0x000000FF
WHITE = 0xFFFFFFFF
RED = 0xFF0000FF

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")
_OPACITY_SUFFIX = re.compile(r"^(.*?)\s*@\s*(\d*\.?\d+)$")


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int
    opacity: int | None = None


@dataclass(frozen=True)
class Rgba:
    r: int
    g: int
    b: int
    a: int
    opacity: int | None = None


@dataclass(frozen=True)
class Hex:
    """Hex color text: ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``; ``#`` and ``0x`` are optional."""

    value: str
    opacity: int | None = None


@dataclass(frozen=True)
class Named:
    """HTML/CSS color name, optionally with an ``@ <0..1>`` opacity suffix (``"red @ 0.5"``)."""

    name: str
    opacity: int | None = None


@dataclass(frozen=True)
class Packed:
    value: int
    opacity: int | None = None


ColorSpec = Union[Rgb, Rgba, Hex, Named, Packed]


def pack_rgba(r: int, g: int, b: int, a: int = 255) -> int:
    for label, channel in (("r", r), ("g", g), ("b", b), ("a", a)):
        _check_channel(channel, label)
    return (int(r) << 24) | (int(g) << 16) | (int(b) << 8) | int(a)


def color_to_rgba(packed: int) -> RGBA:
    value = int(packed)
    return ((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def resolve_color(spec: ColorSpec) -> int:
    if isinstance(spec, Rgb):
        packed = pack_rgba(spec.r, spec.g, spec.b, 255)
    elif isinstance(spec, Rgba):
        packed = pack_rgba(spec.r, spec.g, spec.b, spec.a)
    elif isinstance(spec, Hex):
        packed = _from_hex(spec.value)
    elif isinstance(spec, Named):
        packed, suffix_opacity = _from_name(spec.name)
        if spec.opacity is None and suffix_opacity is not None:
            return _with_opacity(packed, suffix_opacity)
    elif isinstance(spec, Packed):
        if isinstance(spec.value, bool) or not isinstance(spec.value, int) or not 0 <= spec.value <= 0xFFFFFFFF:
            raise UnrecognizedColorError(f"packed color must be an int in [0, 0xFFFFFFFF]: {spec.value!r}")
        packed = spec.value
    else:
        raise UnrecognizedColorError(f"don't know how to create a color from {spec!r}")

    if spec.opacity is not None:
        return _with_opacity(packed, spec.opacity)
    return packed


def parse_color_spec(text: str) -> ColorSpec:
    """Build a color spec from CLI or config text."""
    raw = str(text).strip()
    if not raw:
        raise UnrecognizedColorError("empty color")
    if "," in raw:
        parts = [p.strip() for p in raw.split(",")]
        try:
            channels = [int(p) for p in parts]
        except ValueError as exc:
            raise UnrecognizedColorError(f"invalid channel list: {raw!r}") from exc
        if len(channels) == 3:
            return Rgb(*channels)
        if len(channels) == 4:
            return Rgba(*channels)
        raise UnrecognizedColorError(f"expected 3 or 4 channels, got {len(channels)}: {raw!r}")
    lowered = raw.lower()
    if lowered.startswith("0x") and len(raw) == 10 and _HEX_DIGITS.match(raw[2:]):
        return Packed(int(raw, 16))
    if raw.startswith("#"):
        return Hex(raw)
    return Named(raw)


def _from_hex(value: str) -> int:
    digits = str(value).strip()
    if digits.lower().startswith("0x"):
        digits = digits[2:]
    elif digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in {3, 4, 6, 8} or not _HEX_DIGITS.match(digits):
        raise UnrecognizedColorError(f"invalid hex color: {value!r}")
    return _pack_pillow_rgb(ImageColor.getrgb("#" + digits))


def _from_name(name: str) -> tuple[int, int | None]:
    text = str(name).strip()
    opacity: int | None = None
    match = _OPACITY_SUFFIX.match(text)
    if match is not None:
        text = match.group(1)
        opacity = int(round(float(match.group(2)) * 255))
    try:
        rgb = ImageColor.getrgb(text)
    except ValueError as exc:
        raise UnrecognizedColorError(f"unknown color name: {name!r}") from exc
    return _pack_pillow_rgb(rgb), opacity


def _pack_pillow_rgb(rgb: tuple[int, ...]) -> int:
    if len(rgb) == 3:
        return pack_rgba(rgb[0], rgb[1], rgb[2], 255)
    return pack_rgba(rgb[0], rgb[1], rgb[2], rgb[3])


def _with_opacity(packed: int, opacity: int) -> int:
    _check_channel(opacity, "opacity")
    return (packed & 0xFFFFFF00) | int(opacity)


def _check_channel(value: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise UnrecognizedColorError(f"{label} must be an int in [0, 255], got {value!r}")


ColorLike = Union[ColorSpec, int]


def to_packed(color: ColorLike) -> int:
    """Accept an already packed int or any ``ColorSpec``."""
    if isinstance(color, bool):
        raise UnrecognizedColorError(f"don't know how to create a color from {color!r}")
    if isinstance(color, int):
        return resolve_color(Packed(color))
    return resolve_color(color)
