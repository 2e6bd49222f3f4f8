import numpy as np
import pytest

from glmeshkit.objloader import ObjLoadError, ObjMesh, load_obj, parse_obj

SAMPLE = """# a single triangle
o thing
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vt 1 0
vt 0 1
vn 0 0 1
vp 1 2 3
f 1/1/1 2/2/1 3/3/1
"""


def test_parse_single_triangle():
    mesh = parse_obj(SAMPLE)
    assert isinstance(mesh, ObjMesh)
    assert len(mesh) == 3
    assert mesh.vertices.tolist() == [[0, 0, 0], [1, 0, 0], [0, 1, 0]]
    assert mesh.normals.tolist() == [[0, 0, 1]] * 3


def test_v_coordinate_is_negated():
    mesh = parse_obj(SAMPLE)
    assert mesh.uvs[:, 0].tolist() == [0, 1, 0]
    assert mesh.uvs[:, 1].tolist() == [0, 0, -1]


def test_face_order_is_followed():
    text = SAMPLE.replace("f 1/1/1 2/2/1 3/3/1", "f 3/3/1 1/1/1 2/2/1")
    mesh = parse_obj(text)
    assert mesh.vertices[0].tolist() == [0, 1, 0]
    assert mesh.vertices[1].tolist() == [0, 0, 0]


def test_extra_corners_are_ignored():
    text = SAMPLE.replace("f 1/1/1 2/2/1 3/3/1", "f 1/1/1 2/2/1 3/3/1 1/1/1")
    assert len(parse_obj(text)) == 3


def test_empty_text_gives_empty_arrays():
    mesh = parse_obj("")
    assert len(mesh) == 0
    assert mesh.vertices.shape == (0, 3)
    assert mesh.uvs.shape == (0, 2)


@pytest.mark.parametrize("face", ["f 1 2 3", "f 1//1 2//1 3//1", "f 1/1/1 2/2/1"])
def test_unsupported_faces_raise(face):
    text = SAMPLE.replace("f 1/1/1 2/2/1 3/3/1", face)
    with pytest.raises(ObjLoadError):
        parse_obj(text)


@pytest.mark.parametrize("face", ["f 1/1/1 2/2/1 4/3/1", "f 0/1/1 2/2/1 3/3/1", "f 1/1/2 2/2/1 3/3/1"])
def test_out_of_range_index_raises(face):
    text = SAMPLE.replace("f 1/1/1 2/2/1 3/3/1", face)
    with pytest.raises(ObjLoadError):
        parse_obj(text)


def test_short_vertex_line_raises():
    with pytest.raises(ObjLoadError):
        parse_obj("v 1 2\n")


def test_load_from_file(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(SAMPLE)
    mesh = load_obj(path)
    np.testing.assert_array_equal(mesh.vertices, parse_obj(SAMPLE).vertices)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ObjLoadError):
        load_obj(tmp_path / "missing.obj")