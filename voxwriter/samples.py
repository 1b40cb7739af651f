"""Sample scenes built with the writer, and a command that saves them."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Callable

from .writer import VoxWriter

_ZOOM_XZ = 5.0
_ZOOM_Y = 5.0
_ITERATIONS = 5


def _mix(x: float, y: float, a: float) -> float:
    return x * (1.0 - a) + y * a


def sine_surface(size: int = 1000) -> VoxWriter:
    """A rippled surface: one voxel per column, height following a sine of the radius."""
    vox = VoxWriter()
    for i in range(size):
        for j in range(size):
            height = math.floor(math.sin((i * i + j * j) / 50000.0) * 150.0) + 150.0
            color = (i + j) % 255 + 1
            vox.add_voxel(i, j, int(height), color)
    return vox


def _julia_distance(rev_x: float, rev_y: float, cx: float, cy: float) -> tuple[float, float, float]:
    kk = 1.0
    hh = 1.0
    for _ in range(_ITERATIONS):
        rev_x_squared = rev_x * rev_x
        rev_y_squared = rev_y * rev_y
        hh *= 4.0 * kk
        kk = rev_x_squared + rev_y_squared
        if kk > 4.0:
            break
        rev_y = 2.0 * rev_x * rev_y + cy
        rev_x = rev_x_squared - rev_y_squared + cx
    if kk <= 0.0 or hh == 0.0:
        return math.nan, rev_x, rev_y
    return math.sqrt(kk / hh) * math.log10(kk), rev_x, rev_y


def julia_revolute(size: int = 1000) -> VoxWriter:
    """A Julia set revolved around the vertical axis, sampled on a size^3 grid."""
    vox = VoxWriter()
    for i in range(size):
        px = (i * 2.0 / size - 1.0) * _ZOOM_XZ
        for k in range(size):
            pz = (k * 2.0 / size - 1.0) * _ZOOM_XZ
            angle = math.atan2(px, pz)
            cx = _mix(0.2, -0.5, math.sin(angle * 2.0))
            cy = _mix(0.5, 0.0, math.sin(angle * 3.0))
            path = math.sqrt(px * px + pz * pz) - 3.0
            for j in range(size):
                rev_y = (j * 2.0 / size - 1.0) * _ZOOM_Y
                df, rev_x, rev_y = _julia_distance(path, rev_y, cx, cy)
                if abs(df) - 0.01 < 0.0:
                    color = int((math.sin(rev_x + rev_y) * 0.5 + 0.5) * 6.0) + 249
                    # the file format uses z as the up axis
                    vox.add_voxel(i, k, j, color)
    return vox


def solid_cube(size: int = 300) -> VoxWriter:
    """A filled cube of size^3 voxels in a single colour."""
    vox = VoxWriter()
    for i in range(size):
        for j in range(size):
            for k in range(size):
                vox.add_voxel(i, j, k, 100)
    return vox


_SAMPLES: dict[str, tuple[Callable[[int], VoxWriter], int, str]] = {
    "sine": (sine_surface, 1000, "output_voxwriter.vox"),
    "julia": (julia_revolute, 1000, "julia_revolute_voxwriter.vox"),
    "cube": (solid_cube, 300, "output_cube_voxwriter.vox"),
}


def main(argv: list[str] | None = None) -> int:
    """Build a sample scene, save it and print its statistics."""
    parser = argparse.ArgumentParser(
        prog="voxwriter-samples", description="Generate a sample .vox scene."
    )
    parser.add_argument("sample", choices=sorted(_SAMPLES), help="scene to generate")
    parser.add_argument("--size", type=int, help="edge length of the sampled grid")
    parser.add_argument("-o", "--output", help="file to write")
    args = parser.parse_args(argv)

    build, default_size, default_output = _SAMPLES[args.sample]
    size = default_size if args.size is None else args.size
    if size < 0:
        parser.error("size must not be negative")

    start = time.perf_counter()
    vox = build(size)
    vox.save(args.output or default_output)
    vox.print_stats()
    print(f"Elapsed time : {time.perf_counter() - start} secs")
    return 0