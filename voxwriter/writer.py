"""Building MagicaVoxel scenes voxel by voxel and encoding them as ``.vox`` files."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from os import PathLike

from .chunks import (
    GroupNode,
    PaletteChunk,
    ShapeModel,
    ShapeNode,
    SizeChunk,
    TransformNode,
    VoxDict,
    VoxelChunk,
    make_id,
    make_id_u8,
)

_FILE_VERSION = 150
_MAX_CUBE_EDGE = 126
_FAR_AWAY = 10_000_000
_PALETTE_WRITTEN = 255

Point = tuple[float, float, float]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _truncated_remainder(value: int, divisor: int) -> int:
    """Remainder with the sign of the dividend, as integer hardware computes it."""
    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


@dataclass
class Aabb:
    """An axis-aligned bounding box that grows to include points."""

    lower: Point = (float(_FAR_AWAY),) * 3
    upper: Point = (0.0, 0.0, 0.0)

    def combine(self, point: Point) -> None:
        """Grow the box so that it contains ``point``."""
        self.lower = tuple(min(low, p) for low, p in zip(self.lower, point))
        self.upper = tuple(max(up, p) for up, p in zip(self.upper, point))

    def size(self) -> Point:
        return tuple(up - low for low, up in zip(self.lower, self.upper))


@dataclass
class VoxCube:
    """One model of the scene: a block of voxels at a cube position."""

    cube_id: int
    position: tuple[int, int, int]
    size: SizeChunk
    voxels: VoxelChunk = field(default_factory=VoxelChunk)

    def to_bytes(self) -> bytes:
        return self.size.to_bytes() + self.voxels.to_bytes()


@dataclass(frozen=True)
class VoxStats:
    """Summary figures of a writer's content."""

    cube_count: int
    volume: Point
    voxel_count: int


class VoxWriter:
    """Collects voxels into cubes of limited size and writes them as a ``.vox`` file."""

    def __init__(
        self,
        limit_x: int = _MAX_CUBE_EDGE,
        limit_y: int = _MAX_CUBE_EDGE,
        limit_z: int = _MAX_CUBE_EDGE,
    ) -> None:
        self._limits = (
            _clamp(limit_x, 0, _MAX_CUBE_EDGE),
            _clamp(limit_y, 0, _MAX_CUBE_EDGE),
            _clamp(limit_z, 0, _MAX_CUBE_EDGE),
        )
        self._volume = Aabb()
        self._colors: list[int] = []
        self._cubes: list[VoxCube] = []
        self._min_cube = [_FAR_AWAY] * 3
        self._cube_ids: dict[tuple[int, int, int], int] = {}
        self._voxel_ids: dict[tuple[int, int, int], int] = {}

    def clear_voxels(self) -> None:
        """Drop all cubes and the voxels they hold."""
        self._cubes.clear()

    def clear_colors(self) -> None:
        """Drop all palette colours."""
        self._colors.clear()

    def add_color(self, r: int, g: int, b: int, a: int, index: int) -> None:
        """Set the palette entry at ``index`` to the given RGBA colour."""
        if not 0 <= index <= 0xFF:
            raise ValueError(f"color index out of range: {index}")
        color = make_id_u8(r, g, b, a)
        if len(self._colors) <= index:
            self._colors.extend([0] * (index + 1 - len(self._colors)))
        self._colors[index] = color

    def add_voxel(self, x: int, y: int, z: int, color_index: int) -> None:
        """Add a voxel at world position x, y, z; the cube holding it is found automatically."""
        point = (x, y, z)
        cube_pos = tuple(v // limit for v, limit in zip(point, self._limits))
        self._min_cube = [min(m, c) for m, c in zip(self._min_cube, cube_pos)]
        self._merge_voxel(point, color_index, cube_pos)

    def _cube_id(self, cube_pos: tuple[int, int, int]) -> int:
        if cube_pos not in self._cube_ids:
            self._cube_ids[cube_pos] = len(self._cube_ids)
        return self._cube_ids[cube_pos]

    def _cube(self, cube_pos: tuple[int, int, int]) -> VoxCube | None:
        cube_id = self._cube_id(cube_pos)
        if cube_id == len(self._cubes):
            self._cubes.append(VoxCube(cube_id, cube_pos, SizeChunk(*self._limits)))
        if cube_id < len(self._cubes):
            return self._cubes[cube_id]
        return None

    def _merge_voxel(
        self, point: tuple[int, int, int], color_index: int, cube_pos: tuple[int, int, int]
    ) -> None:
        self._volume.combine(tuple(float(v) for v in point))
        if point in self._voxel_ids:
            return
        local = [_truncated_remainder(v, limit) for v, limit in zip(point, self._limits)]
        cube = self._cube(cube_pos)
        if cube is None:
            return
        cube.voxels.add(*local, color_index)
        self._voxel_ids[point] = len(cube.voxels.voxels)

    def _translation(self, cube: VoxCube) -> tuple[int, int, int]:
        size = self._volume.size()
        lower = self._volume.lower
        centred = [
            (cube.position[axis] - self._min_cube[axis] + 0.5) * self._limits[axis]
            for axis in range(3)
        ]
        return (
            math.floor(centred[0] - lower[0] - size[0] * 0.5),
            math.floor(centred[1] - lower[1] - size[1] * 0.5),
            math.floor(centred[2]),
        )

    def _palette(self) -> PaletteChunk:
        written = self._colors[:_PALETTE_WRITTEN]
        padding = [0] * (256 - len(written))
        return PaletteChunk(written + padding)

    def to_bytes(self) -> bytes:
        """Encode the whole scene as the content of a ``.vox`` file."""
        body = bytearray()
        transforms: list[TransformNode] = []
        shapes: list[ShapeNode] = []
        group_children: list[int] = []
        node_id = 1
        for index, cube in enumerate(self._cubes):
            body += cube.to_bytes()
            node_id += 1
            transform_id = node_id
            node_id += 1
            tx, ty, tz = self._translation(cube)
            frame = VoxDict()
            frame.add("_t", f"{tx} {ty} {tz}")
            transforms.append(
                TransformNode(
                    node_id=transform_id, child_node_id=node_id, layer_id=0, frames=[frame]
                )
            )
            shapes.append(ShapeNode(node_id=node_id, models=[ShapeModel(model_id=index)]))
            group_children.append(transform_id)

        body += TransformNode(node_id=0, child_node_id=1).to_bytes()
        body += GroupNode(node_id=1, child_nodes=group_children).to_bytes()
        for transform, shape in zip(transforms, shapes):
            body += transform.to_bytes()
            body += shape.to_bytes()
        if self._colors:
            body += self._palette().to_bytes()

        header = struct.pack(
            "<IiIii", make_id(*"VOX "), _FILE_VERSION, make_id(*"MAIN"), 0, len(body)
        )
        return header + bytes(body)

    def save(self, path: str | PathLike[str]) -> None:
        """Write the scene to ``path``."""
        data = self.to_bytes()
        with open(path, "wb") as handle:
            handle.write(data)

    def stats(self) -> VoxStats:
        return VoxStats(
            cube_count=len(self._cubes),
            volume=self._volume.size(),
            voxel_count=sum(cube.voxels.num_voxels() for cube in self._cubes),
        )

    def print_stats(self) -> None:
        """Print the number of cubes, the volume size and the number of voxels."""
        stats = self.stats()
        print("---- Stats -----")
        print(f"count cubes : {stats.cube_count}")
        print("Volume : " + " x ".join(_format_number(v) for v in stats.volume))
        print(f"count voxels : {stats.voxel_count}")
        print("----------------")