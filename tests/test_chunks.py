import struct

import pytest

from voxwriter.chunks import (
    DictItem,
    DictString,
    GroupNode,
    LayerNode,
    PaletteChunk,
    ShapeModel,
    ShapeNode,
    SizeChunk,
    TransformNode,
    VoxDict,
    VoxelChunk,
    chunk_header,
    make_id,
    make_id_u8,
)


def test_make_id():
    assert make_id("V", "O", "X", " ") == 542658390


def test_make_id_u8():
    assert make_id_u8(86, 79, 88, 32) == 542658390


def test_make_id_u8_out_of_range():
    with pytest.raises(ValueError):
        make_id_u8(256, 0, 0, 0)


def test_chunk_header_layout():
    header = chunk_header("MAIN", 7, 9)
    assert header == b"MAIN" + struct.pack("<ii", 7, 9)


def test_chunk_header_bad_name():
    with pytest.raises(ValueError):
        chunk_header("ABC", 0, 0)


def test_dictstring_empty_size():
    assert DictString().size() == 4


def test_dictstring_filled_size():
    assert DictString("toto va au zoo et c'est beau").size() == 32


def test_dictstring_bytes():
    assert DictString("_t").to_bytes() == b"\x02\x00\x00\x00_t"


def test_dictstring_rejects_nul():
    with pytest.raises(ValueError):
        DictString(b"a\x00b")


def test_dictitem():
    item = DictItem(DictString("_t"), DictString("1 2 3"))
    assert item.size() == 15
    assert item.to_bytes() == b"\x02\x00\x00\x00_t\x05\x00\x00\x001 2 3"


def test_voxdict():
    d = VoxDict()
    assert d.to_bytes() == b"\x00\x00\x00\x00"
    d.add("_t", "1 2 3")
    assert d.size() == 19
    data = d.to_bytes()
    assert len(data) == d.size()
    assert data[:4] == struct.pack("<i", 1)


def test_transform_node_default():
    node = TransformNode()
    assert node.size() == 28
    data = node.to_bytes()
    assert data[:4] == b"nTRN"
    assert struct.unpack("<ii", data[4:12]) == (28, 0)
    assert struct.unpack("<iiiiiii", data[12:]) == (0, 0, 0, -1, -1, 1, 0)


def test_transform_node_with_frame():
    node = TransformNode(node_id=2, child_node_id=3, layer_id=0)
    node.frames[0].add("_t", "1 2 3")
    assert node.size() == 20 + 4 + 19
    data = node.to_bytes()
    assert len(data) == 12 + node.size()
    assert data.endswith(b"_t\x05\x00\x00\x001 2 3")


def test_shape_model():
    model = ShapeModel(model_id=5)
    assert model.size() == 8
    assert model.to_bytes() == struct.pack("<ii", 5, 0)


def test_shape_node():
    node = ShapeNode(node_id=3)
    node.models[0].model_id = 7
    assert node.size() == 20
    data = node.to_bytes()
    assert data[:4] == b"nSHP"
    assert struct.unpack("<iiiii", data[12:]) == (3, 0, 1, 7, 0)


def test_layer_node():
    node = LayerNode(node_id=2)
    node.attributes.add("_name", "2")
    assert node.size() == 8 + 4 + 9 + 5
    data = node.to_bytes()
    assert data[:4] == b"LAYR"
    assert len(data) == 12 + node.size()
    assert data[-4:] == struct.pack("<i", 0)


def test_voxel_chunk():
    chunk = VoxelChunk()
    assert chunk.num_voxels() == 0
    chunk.add(1, 2, 3, 4)
    chunk.add(5, 6, 7, 300)
    assert chunk.num_voxels() == 2
    assert chunk.size() == 12
    data = chunk.to_bytes()
    assert data[:4] == b"XYZI"
    assert struct.unpack("<iii", data[4:16]) == (12, 0, 2)
    assert data[16:] == bytes([1, 2, 3, 4, 5, 6, 7, 44])


def test_palette_chunk():
    palette = PaletteChunk()
    palette.colors[0] = make_id_u8(255, 0, 0, 255)
    assert palette.size() == 1024
    data = palette.to_bytes()
    assert len(data) == 12 + 1024
    assert data[:4] == b"RGBA"
    assert data[12:16] == bytes([255, 0, 0, 255])
    assert data[16:] == bytes(1020)


def test_palette_chunk_wrong_length():
    with pytest.raises(ValueError):
        PaletteChunk([0] * 10)