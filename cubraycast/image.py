"""Frame buffers, wall and sprite textures, and BMP screenshots."""

from __future__ import annotations

import struct
from array import array
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image as PILImage

from .errors import BmpError, DisplayError
from .state import SceneConfig

_FILE_HEADER_SIZE = 14
_INFO_HEADER_SIZE = 40
_BITS_PER_PIXEL = 24


@dataclass(eq=False)
class Image:
    """A rectangle of 32-bit ``0xTTRRGGBB`` pixels stored row by row."""

    width: int
    height: int
    pixels: Optional[array] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise DisplayError(2)
        size = self.width * self.height
        if self.pixels is None:
            self.pixels = array("L", [0]) * size
        elif len(self.pixels) != size:
            raise ValueError("pixel count does not match the image size")

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set pixel (x, y); writes outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Read pixel (x, y), clamping the coordinates into the image."""
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)
        return self.pixels[y * self.width + x]

    def to_rgb_bytes(self) -> bytes:
        """The pixels as packed RGB triplets, row by row."""
        return bytes(
            channel
            for pixel in self.pixels
            for channel in ((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF)
        )

    @classmethod
    def from_file(cls, path: str) -> "Image":
        """Load an image file (XPM or any format the imaging library reads)."""
        try:
            with PILImage.open(path) as source:
                rgb = source.convert("RGB")
        except (OSError, ValueError, SyntaxError):
            raise DisplayError(2) from None
        data = rgb.tobytes()
        pixels = array(
            "L",
            (
                (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
                for i in range(0, len(data), 3)
            ),
        )
        return cls(rgb.width, rgb.height, pixels)


@dataclass
class Textures:
    """The four wall textures and the sprite texture of a scene."""

    north: Image
    south: Image
    east: Image
    west: Image
    sprite: Image

    @classmethod
    def load(cls, config: SceneConfig) -> "Textures":
        """Load every texture named in ``config`` and record the sprite key colour."""
        paths = (config.north, config.south, config.east, config.west, config.sprite)
        if any(path is None for path in paths):
            raise DisplayError(2)
        north, south, east, west, sprite = (Image.from_file(path) for path in paths)
        config.sprite_key_color = sprite.get_pixel(0, 0)
        return cls(north=north, south=south, east=east, west=west, sprite=sprite)


def byte_correction(width: int) -> int:
    """Number of padding bytes that close a 24-bit BMP row of ``width`` pixels."""
    return (4 - (3 * width) % 4) % 4


def encode_bmp(image: Image) -> bytes:
    """Encode ``image`` as an uncompressed 24-bit bottom-up BMP file."""
    padding = byte_correction(image.width)
    data_size = 3 * image.width * image.height + image.height * padding
    offset = _FILE_HEADER_SIZE + _INFO_HEADER_SIZE
    header = struct.pack(
        "<2sIIIIiiHHIIiiII",
        b"BM",
        offset + data_size,
        0,
        offset,
        _INFO_HEADER_SIZE,
        image.width,
        image.height,
        1,
        _BITS_PER_PIXEL,
        0,
        data_size,
        0,
        0,
        0,
        0,
    )
    body = bytearray()
    pad = bytes(padding)
    for y in range(image.height - 1, -1, -1):
        row = image.pixels[y * image.width:(y + 1) * image.width]
        for pixel in row:
            body += bytes((pixel & 0xFF, (pixel >> 8) & 0xFF, (pixel >> 16) & 0xFF))
        body += pad
    return header + bytes(body)


def write_bmp(image: Image, path: str) -> None:
    """Write ``image`` to ``path`` as a BMP file."""
    try:
        with open(path, "wb") as handle:
            handle.write(encode_bmp(image))
    except OSError:
        raise BmpError(1) from None