"""Chunk structures of the MagicaVoxel ``.vox`` file format and their encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

_INT = struct.Struct("<i")
_UINT = struct.Struct("<I")
_INT_SIZE = _INT.size
_PALETTE_ENTRIES = 256


def _pack_int(value: int) -> bytes:
    return _INT.pack(value)


def _pack_word(value: int) -> bytes:
    """Pack a 32-bit value, signed or unsigned, as four little-endian bytes."""
    return _UINT.pack(value & 0xFFFFFFFF)


def make_id(a: str, b: str, c: str, d: str) -> int:
    """Build a four-character chunk identifier from four characters."""
    return (ord(a) | (ord(b) << 8) | (ord(c) << 16) | (ord(d) << 24)) & 0xFFFFFFFF


def make_id_u8(a: int, b: int, c: int, d: int) -> int:
    """Build a 32-bit little-endian word from four byte values."""
    for part in (a, b, c, d):
        if not 0 <= part <= 0xFF:
            raise ValueError(f"byte value out of range: {part}")
    return a | (b << 8) | (c << 16) | (d << 24)


def chunk_header(name: str, content_size: int, children_size: int) -> bytes:
    """Encode a chunk header: identifier, content size and children size."""
    if len(name) != 4:
        raise ValueError(f"chunk name must have four characters: {name!r}")
    return _pack_word(make_id(*name)) + _pack_int(content_size) + _pack_int(children_size)


@dataclass
class DictString:
    """A length-prefixed byte string as stored in ``.vox`` dictionaries."""

    value: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            self.value = self.value.encode("utf-8")
        else:
            self.value = bytes(self.value)
        if b"\x00" in self.value:
            raise ValueError("dictionary strings may not contain NUL bytes")

    def to_bytes(self) -> bytes:
        return _pack_int(len(self.value)) + self.value

    def size(self) -> int:
        return _INT_SIZE + len(self.value)


@dataclass
class DictItem:
    """A key/value pair of a ``.vox`` dictionary."""

    key: DictString = field(default_factory=DictString)
    value: DictString = field(default_factory=DictString)

    def to_bytes(self) -> bytes:
        return self.key.to_bytes() + self.value.to_bytes()

    def size(self) -> int:
        return self.key.size() + self.value.size()


@dataclass
class VoxDict:
    """An ordered dictionary of string pairs, prefixed by its item count."""

    items: list[DictItem] = field(default_factory=list)

    def add(self, key: str | bytes, value: str | bytes) -> None:
        self.items.append(DictItem(DictString(key), DictString(value)))

    def to_bytes(self) -> bytes:
        return _pack_int(len(self.items)) + b"".join(item.to_bytes() for item in self.items)

    def size(self) -> int:
        return _INT_SIZE + sum(item.size() for item in self.items)


@dataclass
class TransformNode:
    """The ``nTRN`` chunk: a transform node of the scene graph."""

    node_id: int = 0
    attributes: VoxDict = field(default_factory=VoxDict)
    child_node_id: int = 0
    reserved_id: int = -1
    layer_id: int = -1
    frames: list[VoxDict] = field(default_factory=lambda: [VoxDict()])

    def to_bytes(self) -> bytes:
        parts = [
            chunk_header("nTRN", self.size(), 0),
            _pack_int(self.node_id),
            self.attributes.to_bytes(),
            _pack_int(self.child_node_id),
            _pack_int(self.reserved_id),
            _pack_int(self.layer_id),
            _pack_int(len(self.frames)),
        ]
        parts.extend(frame.to_bytes() for frame in self.frames)
        return b"".join(parts)

    def size(self) -> int:
        return (
            _INT_SIZE * 5
            + self.attributes.size()
            + sum(frame.size() for frame in self.frames)
        )


@dataclass
class GroupNode:
    """The ``nGRP`` chunk: a group node listing its child node ids."""

    node_id: int = 0
    attributes: VoxDict = field(default_factory=VoxDict)
    child_nodes: list[int] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return b"".join(
            [
                chunk_header("nGRP", self.size(), 0),
                _pack_int(self.node_id),
                self.attributes.to_bytes(),
                _pack_int(len(self.child_nodes)),
                *(_pack_int(child) for child in self.child_nodes),
            ]
        )

    def size(self) -> int:
        return _INT_SIZE * (2 + len(self.child_nodes)) + self.attributes.size()


@dataclass
class ShapeModel:
    """A model reference inside a shape node."""

    model_id: int = 0
    attributes: VoxDict = field(default_factory=VoxDict)

    def to_bytes(self) -> bytes:
        return _pack_int(self.model_id) + self.attributes.to_bytes()

    def size(self) -> int:
        return _INT_SIZE + self.attributes.size()


@dataclass
class ShapeNode:
    """The ``nSHP`` chunk: a shape node referencing models."""

    node_id: int = 0
    attributes: VoxDict = field(default_factory=VoxDict)
    models: list[ShapeModel] = field(default_factory=lambda: [ShapeModel()])

    def to_bytes(self) -> bytes:
        parts = [
            chunk_header("nSHP", self.size(), 0),
            _pack_int(self.node_id),
            self.attributes.to_bytes(),
            _pack_int(len(self.models)),
        ]
        parts.extend(model.to_bytes() for model in self.models)
        return b"".join(parts)

    def size(self) -> int:
        return (
            _INT_SIZE * 2
            + self.attributes.size()
            + sum(model.size() for model in self.models)
        )


@dataclass
class LayerNode:
    """The ``LAYR`` chunk: a layer description."""

    node_id: int = 0
    attributes: VoxDict = field(default_factory=VoxDict)
    reserved_id: int = 0

    def to_bytes(self) -> bytes:
        return b"".join(
            [
                chunk_header("LAYR", self.size(), 0),
                _pack_int(self.node_id),
                self.attributes.to_bytes(),
                _pack_int(self.reserved_id),
            ]
        )

    def size(self) -> int:
        return _INT_SIZE * 2 + self.attributes.size()


@dataclass
class SizeChunk:
    """The ``SIZE`` chunk: the dimensions of one model."""

    x: int = 0
    y: int = 0
    z: int = 0

    def to_bytes(self) -> bytes:
        return (
            chunk_header("SIZE", self.size(), 0)
            + _pack_int(self.x)
            + _pack_int(self.y)
            + _pack_int(self.z)
        )

    def size(self) -> int:
        return _INT_SIZE * 3


@dataclass
class VoxelChunk:
    """The ``XYZI`` chunk: voxels as packed x, y, z, color-index bytes."""

    voxels: bytearray = field(default_factory=bytearray)

    def add(self, x: int, y: int, z: int, color_index: int) -> None:
        self.voxels.extend(v & 0xFF for v in (x, y, z, color_index))

    def num_voxels(self) -> int:
        return len(self.voxels) // 4

    def to_bytes(self) -> bytes:
        return (
            chunk_header("XYZI", self.size(), 0)
            + _pack_int(self.num_voxels())
            + bytes(self.voxels)
        )

    def size(self) -> int:
        return _INT_SIZE * (1 + self.num_voxels())


@dataclass
class PaletteChunk:
    """The ``RGBA`` chunk: a palette of 256 packed colours."""

    colors: list[int] = field(default_factory=lambda: [0] * _PALETTE_ENTRIES)

    def __post_init__(self) -> None:
        if len(self.colors) != _PALETTE_ENTRIES:
            raise ValueError(
                f"a palette holds exactly {_PALETTE_ENTRIES} colors, got {len(self.colors)}"
            )

    def to_bytes(self) -> bytes:
        return chunk_header("RGBA", self.size(), 0) + b"".join(
            _pack_word(color) for color in self.colors
        )

    def size(self) -> int:
        return 4 * _PALETTE_ENTRIES