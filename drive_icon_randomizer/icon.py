"""
Picture -> .ico conversion.

The icon holds exactly one image, stored as PNG ("PNG-in-ICO"):

    ICONDIR       6 bytes   reserved=0, type=1 (icon), count=1
    ICONDIRENTRY 16 bytes   width, height, colors, reserved, planes, bpp,
                            payload size, payload offset (always 22)
    PNG payload
"""

import io
import struct

from PIL import Image

from drive_icon_randomizer.errors import DecodeError, EncodeError

ICON_HEADER_SIZE = 6
ICON_ENTRY_SIZE = 16
ICON_DATA_OFFSET = ICON_HEADER_SIZE + ICON_ENTRY_SIZE

# Offset of the payload size field inside the whole file
_SIZE_FIELD_POS = ICON_HEADER_SIZE + 8


def load_image(path):
    try:
        img = Image.open(path)
        img.load()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Cannot read image {path}: {e}") from e
    return img


def _dim_byte(n):
    # 256 and above are stored as 0, readers take 0 as 256
    return 0 if n >= 256 else n


def encode_icon(img):
    """Return the bytes of a single-image .ico holding `img` as PNG."""
    buf = io.BytesIO()
    buf.write(struct.pack("<HHH", 0, 1, 1))
    buf.write(struct.pack("<BBBBHH",
                          _dim_byte(img.width), _dim_byte(img.height),
                          0, 0, 0, 0))
    buf.write(struct.pack("<I", 0))  # size, patched below
    buf.write(struct.pack("<I", ICON_DATA_OFFSET))

    try:
        img.convert("RGBA").save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"Cannot encode image as PNG: {e}") from e

    size = buf.tell() - ICON_DATA_OFFSET
    buf.seek(_SIZE_FIELD_POS)
    buf.write(struct.pack("<I", size))
    return buf.getvalue()


def image_to_icon(path):
    with load_image(path) as img:
        return encode_icon(img)
