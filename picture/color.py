"""
picture/color.py

Immutable 8-bit RGB colour value.
"""
from dataclasses import dataclass
from typing import Tuple


def _clamp_channel(value) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """
    One opaque RGB pixel value. Channels are clamped to [0, 255] on construction.
    """
    red: int
    green: int
    blue: int

    def __post_init__(self):
        # frozen dataclass -> bypass __setattr__ to store the clamped values
        object.__setattr__(self, "red", _clamp_channel(self.red))
        object.__setattr__(self, "green", _clamp_channel(self.green))
        object.__setattr__(self, "blue", _clamp_channel(self.blue))

    def invert(self) -> "Color":
        return Color(255 - self.red, 255 - self.green, 255 - self.blue)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_rgb_int(self) -> int:
        """Pack as 0xRRGGBB."""
        return (self.red << 16) | (self.green << 8) | self.blue

    @classmethod
    def from_rgb_int(cls, packed: int) -> "Color":
        """Unpack 0xRRGGBB (any alpha byte above bit 24 is ignored)."""
        return cls((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)

    def __str__(self) -> str:
        return f"({self.red},{self.green},{self.blue})"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
