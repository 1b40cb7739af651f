# voxwriter

A small library for writing voxel volumes in the MagicaVoxel `.vox` format.

You add voxels one at a time, each at an integer position and with a palette
colour index. The writer splits the volume into cubes, and each cube goes
into the file as its own model. A transform node in the scene graph places
each model. By default a cube is at most 126 voxels per side. Because of
this split, the whole volume can be much larger than one MagicaVoxel model.

## Installation

```
pip install voxwriter
```

## Usage

```python
from voxwriter.writer import VoxWriter

vox = VoxWriter()
for x in range(200):
    for y in range(200):
        vox.add_voxel(x, y, (x + y) % 50, (x + y) % 255 + 1)

vox.add_color(255, 0, 0, 255, 1)   # optional custom palette entry
vox.save("output.vox")
vox.print_stats()
```

### The writer

- `VoxWriter(limit_x, limit_y, limit_z)` sets the cube edge lengths. Each one
  defaults to 126 and is clamped to the range 0 to 126.
- `add_voxel(x, y, z, color_index)` adds a voxel. The writer finds or creates
  the cube that holds it. If a position gets a voxel more than once, the
  first voxel stays and the later ones are ignored.
- `add_color(r, g, b, a, index)` sets a palette entry. Every value must be in
  the range 0 to 255. Otherwise it raises `ValueError`.
- `clear_voxels()` drops all cubes. `clear_colors()` drops the palette.
- `to_bytes()` returns the whole file contents without touching the disk.
  `save(path)` writes those contents to `path`.
- The palette chunk is written only when at least one colour has been added.
  Only the first 255 entries are written. The others are left as zero.
- `stats()` returns a `VoxStats` with `cube_count`, `volume` (the size of the
  bounding box of all added voxels) and `voxel_count`. `print_stats()`
  prints the same figures.

### Chunks

The low-level chunk classes are in `voxwriter.chunks`:

- `DictString`, `DictItem` and `VoxDict`
- `TransformNode`, `GroupNode`, `ShapeNode`, `ShapeModel` and `LayerNode`
- `SizeChunk`, `VoxelChunk` and `PaletteChunk`

Each class has `to_bytes()` and `size()`. `size()` returns the size of the
content. The helpers `make_id`, `make_id_u8` and `chunk_header` build chunk
identifiers and headers. Use these classes to build or check single parts of
a file.

## Sample volumes

`voxwriter.samples` has three generators. Each takes an edge length and
returns a `VoxWriter`:

- `sine_surface(size)`: a rippled surface.
- `julia_revolute(size)`: a Julia set revolved around the vertical axis.
- `solid_cube(size)`: a filled cube in one colour.

The `voxwriter-samples` command builds a sample, saves it, prints its
statistics and prints the elapsed time:

```
voxwriter-samples sine
voxwriter-samples cube --size 50 -o cube.vox
voxwriter-samples --help
```

The sample name is `sine`, `julia` or `cube`. `--size` changes the edge
length of the grid. `-o`/`--output` sets the output file.

## What it does not do

This package only writes `.vox` files. It cannot read or edit existing
files. The writer produces a single frame: it writes no animation and no
layer chunks, although `LayerNode` can encode a layer chunk by itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```