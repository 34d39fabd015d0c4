"""RGB color value used by embed builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

_CHANNEL_MAX: Final[int] = 0xFF


@dataclass(slots=True, frozen=True)
class Color:
    """An RGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, channel in (("r", self.r), ("g", self.g), ("b", self.b)):
            if isinstance(channel, bool) or not isinstance(channel, int):
                msg = f"Color channel {name} must be an integer, got {channel!r}"
                raise ValueError(msg)
            if not 0 <= channel <= _CHANNEL_MAX:
                msg = f"Color channel {name} must be between 0 and 255, got {channel}"
                raise ValueError(msg)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create a color from 0-255 channel values."""
        return cls(r, g, b)

    @classmethod
    def from_float_rgb(cls, r: float, g: float, b: float) -> Color:
        """Create a color from 0.0-1.0 channel values."""
        return cls(*(round(channel * _CHANNEL_MAX) for channel in (r, g, b)))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Create a color from a hex string such as ``#ff9900`` or ``0xFF9900``.

        Raises:
            ValueError: If the string is not six hex digits
        """
        normalized = value.strip().lower()
        if normalized.startswith("#"):
            normalized = normalized[1:]
        if normalized.startswith("0x"):
            normalized = normalized[2:]
        if len(normalized) != 6:
            msg = f"Invalid hex color string: {value!r}"
            raise ValueError(msg)
        try:
            packed = int(normalized, 16)
        except ValueError as exc:
            msg = f"Invalid hex color string: {value!r}"
            raise ValueError(msg) from exc
        return cls.from_int(packed)

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Unpack a 24-bit integer into a color."""
        if not 0 <= value <= 0xFFFFFF:
            msg = f"Packed color must be between 0x000000 and 0xFFFFFF, got {value}"
            raise ValueError(msg)
        return cls((value >> 16) & _CHANNEL_MAX, (value >> 8) & _CHANNEL_MAX, value & _CHANNEL_MAX)

    def to_int(self) -> int:
        """Pack the channels as ``R<<16 | G<<8 | B``."""
        return (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self) -> str:
        """Return the color as a six digit lower-case hex string."""
        return f"{self.to_int():06x}"


type ColorLike = Color | tuple[int, int, int] | tuple[float, float, float] | str


def pack_color(value: ColorLike) -> int:
    """Convert any accepted color representation to its packed integer form.

    Args:
        value: A ``Color``, an ``(r, g, b)`` tuple of 0-255 integers or
            0.0-1.0 floats, or a hex string

    Returns:
        24-bit packed color
    """
    if isinstance(value, Color):
        return value.to_int()
    if isinstance(value, str):
        return Color.from_hex(value).to_int()
    r, g, b = value
    if any(isinstance(channel, float) for channel in value):
        return Color.from_float_rgb(r, g, b).to_int()
    return Color(r, g, b).to_int()
