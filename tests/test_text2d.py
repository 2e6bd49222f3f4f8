import numpy as np
import pytest

from glmeshkit.text2d import glyph_uv, text_quads


def test_glyph_uv_of_nul_is_origin():
    assert glyph_uv("\0") == (0.0, 0.0)


def test_glyph_uv_of_capital_a():
    assert glyph_uv("A") == (0.0625, 0.25)


def test_glyph_uv_accepts_int_code():
    assert glyph_uv(ord("z")) == glyph_uv("z")


def test_glyph_uv_in_unit_range_for_ascii():
    for code in range(128):
        u, v = glyph_uv(code)
        assert 0.0 <= u < 1.0
        assert 0.0 <= v < 1.0


def test_glyph_uv_consecutive_codes_step_one_cell():
    u0, v0 = glyph_uv("B")
    u1, v1 = glyph_uv("C")
    assert v1 == v0
    assert u1 - u0 == pytest.approx(1 / 16)


def test_glyph_uv_rejects_wide_character():
    with pytest.raises(ValueError):
        glyph_uv("\u20ac")


def test_empty_text_has_no_geometry():
    vertices, uvs = text_quads("", 10, 20, 8)
    assert vertices.shape == (0, 2)
    assert uvs.shape == (0, 2)


def test_six_vertices_per_character():
    vertices, uvs = text_quads("Hello", 0, 0, 16)
    assert vertices.shape == (30, 2)
    assert uvs.shape == (30, 2)


def test_first_quad_corners():
    vertices, _ = text_quads("X", 10, 20, 8)
    up_left, down_left, up_right, down_right, up_right2, down_left2 = vertices.tolist()
    assert up_left == [10, 28]
    assert down_left == [10, 20]
    assert up_right == [18, 28]
    assert down_right == [18, 20]
    assert up_right2 == up_right
    assert down_left2 == down_left


def test_characters_advance_by_size():
    vertices, _ = text_quads("ab", 5, 7, 12)
    first, second = vertices[:6], vertices[6:]
    np.testing.assert_array_equal(second - first, np.tile([12, 0], (6, 1)))


def test_uvs_cover_one_atlas_cell():
    _, uvs = text_quads("A", 0, 0, 10)
    u, v = glyph_uv("A")
    assert uvs[:, 0].min() == pytest.approx(u)
    assert uvs[:, 1].min() == pytest.approx(v)
    assert uvs[:, 0].max() - uvs[:, 0].min() == pytest.approx(1 / 16)
    assert uvs[:, 1].max() - uvs[:, 1].min() == pytest.approx(1 / 16)


def test_same_character_gives_same_uvs():
    _, uvs = text_quads("qq", 0, 0, 4)
    np.testing.assert_array_equal(uvs[:6], uvs[6:])