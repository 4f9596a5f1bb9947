"""Textures and their loading from image and Radiance HDR files."""

from __future__ import annotations

import enum
import io
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from PIL import Image

from alers.ids import next_id


class PixelFormat(enum.Enum):
    RGB_U8_NULL = "rgb_u8_null"
    RGB_U8 = "rgb_u8"
    RGB_F32 = "rgb_f32"


class TextureWrapType(enum.Enum):
    CLAMP_TO_EDGE = "clamp_to_edge"
    MIRRORED_REPEAT = "mirrored_repeat"
    REPEAT = "repeat"


class TextureMagnificationType(enum.Enum):
    NEAREST = "nearest"
    LINEAR = "linear"


@dataclass
class TextureWrap:
    x: TextureWrapType = TextureWrapType.CLAMP_TO_EDGE
    y: TextureWrapType = TextureWrapType.CLAMP_TO_EDGE


@dataclass
class TextureMagnification:
    min: TextureMagnificationType = TextureMagnificationType.LINEAR
    max: TextureMagnificationType = TextureMagnificationType.LINEAR


class TextureLoadError(Exception):
    """A texture file could not be read or decoded."""

    IMAGE = "image"
    FILE_NOT_FOUND = "file_not_found"

    def __init__(self, reason: str, cause: Optional[BaseException] = None):
        super().__init__(f"texture load failed ({reason}): {cause}")
        self.reason = reason
        self.cause = cause


@dataclass
class Texture:
    """Pixel data with its size, channel count and sampling settings."""

    pixel_format: PixelFormat
    data: Union[bytes, List[float], None]
    width: int
    height: int
    channel_count: int
    wrap: TextureWrap = field(default_factory=TextureWrap)
    magnification: TextureMagnification = field(default_factory=TextureMagnification)
    id: int = field(default_factory=next_id)

    @property
    def uid(self) -> int:
        return self.id

    @classmethod
    def load(cls, path: str) -> "Texture":
        """Load an image, flipped so that the bottom row comes first."""
        if str(path).endswith(".hdr"):
            try:
                width, height, values = read_hdr(path)
            except (OSError, ValueError) as err:
                raise TextureLoadError(TextureLoadError.FILE_NOT_FOUND, err) from err
            flipped = flip_vertically(values, width, height, 3)
            return cls(PixelFormat.RGB_F32, flipped, width, height, 3)

        try:
            with Image.open(path) as img:
                rgb = img.convert("RGB")
                width, height = rgb.size
                raw = rgb.tobytes()
        except (OSError, ValueError) as err:
            raise TextureLoadError(TextureLoadError.IMAGE, err) from err
        flipped = flip_vertically(raw, width, height, 3)
        return cls(PixelFormat.RGB_U8, flipped, width, height, 3)


class TextureLoader:
    """Loads a single texture from a path."""

    def load(self, path: str) -> List[Texture]:
        return [Texture.load(path)]


def flip_vertically(data, width: int, height: int, channel_count: int):
    """Reverse the row order of row-major pixel data."""
    row_size = width * channel_count
    if len(data) < row_size * height:
        raise ValueError(
            f"data holds {len(data)} values, {row_size * height} needed for {width}x{height}x{channel_count}"
        )
    rows = [data[row * row_size:(row + 1) * row_size] for row in reversed(range(height))]
    if isinstance(data, (bytes, bytearray)):
        return b"".join(rows)
    return [value for row in rows for value in row]


def _rgbe_to_float(pixel: Sequence[int]) -> Tuple[float, float, float]:
    r, g, b, e = pixel
    if e == 0:
        return (0.0, 0.0, 0.0)
    f = math.ldexp(1.0, e - 136)
    return (r * f, g * f, b * f)


def _decode_scanline(body: bytes, pos: int, width: int) -> Tuple[List[Tuple[int, ...]], int]:
    is_rle = (
        8 <= width < 0x8000
        and pos + 4 <= len(body)
        and body[pos] == 2
        and body[pos + 1] == 2
        and body[pos + 2] & 0x80 == 0
    )
    if not is_rle:
        end = pos + width * 4
        if end > len(body):
            raise ValueError("truncated pixel data")
        chunk = body[pos:end]
        pixels = [tuple(chunk[n:n + 4]) for n in range(0, len(chunk), 4)]
        return pixels, end

    line_width = (body[pos + 2] << 8) | body[pos + 3]
    if line_width != width:
        raise ValueError(f"scanline width {line_width} does not match image width {width}")
    pos += 4
    channels = []
    for _ in range(4):
        channel = bytearray()
        while len(channel) < width:
            count = body[pos]
            pos += 1
            if count > 128:
                channel.extend(bytes([body[pos]]) * (count - 128))
                pos += 1
            else:
                if count == 0:
                    raise ValueError("zero-length run in scanline")
                literal = body[pos:pos + count]
                if len(literal) != count:
                    raise ValueError("truncated pixel data")
                channel.extend(literal)
                pos += count
        if len(channel) != width:
            raise ValueError("scanline run overflows image width")
        channels.append(channel)
    return list(zip(*channels)), pos


def read_hdr(path: str) -> Tuple[int, int, List[float]]:
    """Read a Radiance RGBE file as (width, height, flat RGB floats, top row first)."""
    with open(path, "rb") as handle:
        raw = handle.read()

    stream = io.BytesIO(raw)
    if not stream.readline().startswith(b"#?"):
        raise ValueError("not a Radiance HDR file")
    while True:
        line = stream.readline()
        if not line:
            raise ValueError("truncated header")
        line = line.rstrip(b"\r\n")
        if not line:
            break
        if line.startswith(b"FORMAT=") and line[len(b"FORMAT="):] != b"32-bit_rle_rgbe":
            raise ValueError(f"unsupported format {line.decode(errors='replace')}")

    tokens = stream.readline().split()
    if len(tokens) != 4 or tokens[0] != b"-Y" or tokens[2] != b"+X":
        raise ValueError("unsupported or missing resolution line")
    try:
        height, width = int(tokens[1]), int(tokens[3])
    except ValueError as err:
        raise ValueError("malformed resolution line") from err

    body = stream.read()
    values: List[float] = []
    pos = 0
    try:
        for _ in range(height):
            pixels, pos = _decode_scanline(body, pos, width)
            for pixel in pixels:
                values.extend(_rgbe_to_float(pixel))
    except IndexError as err:
        raise ValueError("truncated pixel data") from err
    return width, height, values