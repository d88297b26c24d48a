import random
import struct
import zlib

import pytest
from PIL import Image

from drive_icon_randomizer.registry import DriveIconRegistrar, KeyValueStore
from drive_icon_randomizer.store import IconStore


class MemoryRegistry(KeyValueStore):
    """Registry stand-in: {key path: {value name: value}}."""

    def __init__(self, deny=()):
        self.keys = {}
        self.deny = deny

    def _check(self, path):
        for part in self.deny:
            if part in path:
                raise PermissionError(13, "Access is denied")

    def set_value(self, path, name, value):
        self._check(path)
        self.keys.setdefault(path, {})[name] = value

    def get_value(self, path, name):
        try:
            return self.keys[path][name]
        except KeyError:
            raise FileNotFoundError(2, "The system cannot find the file specified")

    def delete_value(self, path, name):
        self._check(path)
        values = self.keys.setdefault(path, {})
        if name not in values:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        del values[name]


@pytest.fixture
def registry():
    return MemoryRegistry()


@pytest.fixture
def registrar(registry):
    return DriveIconRegistrar(registry)


@pytest.fixture
def store(tmp_path):
    s = IconStore(tmp_path / "work")
    s.ensure_working_directory()
    return s


@pytest.fixture
def make_image(tmp_path):
    def _make(name, size=(32, 32), color=(200, 30, 30), folder="pics"):
        path = tmp_path / folder / name
        path.parent.mkdir(parents=True, exist_ok=True)
        img = Image.new("RGB", size, color)
        img.save(path)
        return str(path)
    return _make


def _chunk(cid, data):
    return (struct.pack(">I", len(data)) + cid + data
            + struct.pack(">I", zlib.crc32(cid + data) & 0xffffffff))


@pytest.fixture
def broken_png(tmp_path):
    """
    PNG that opens fine but fails while decoding: the pixel data is split
    over two IDAT chunks and the second chunk's type is garbage.
    """
    rng = random.Random(0)
    noise = bytes(rng.getrandbits(8) for _ in range(64 * 64 * 3))
    path = tmp_path / "pics" / "broken.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.frombytes("RGB", (64, 64), noise).save(path)

    raw = path.read_bytes()
    out, pos = [raw[:8]], 8
    while pos < len(raw):
        length, = struct.unpack(">I", raw[pos:pos + 4])
        cid = raw[pos + 4:pos + 8]
        data = raw[pos + 8:pos + 8 + length]
        pos += 12 + length
        if cid == b"IDAT":
            half = len(data) // 2
            out.append(_chunk(b"IDAT", data[:half]))
            out.append(_chunk(b"\x06\xb4\x06\xb4", data[half:]))
        else:
            out.append(_chunk(cid, data))
    path.write_bytes(b"".join(out))
    return str(path)
