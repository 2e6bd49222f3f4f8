import numpy as np
import pytest

from glmeshkit.tangentspace import compute_tangent_basis

TRI = [(0, 0, 0), (1, 0, 0), (0, 1, 0)]
TRI_UV = [(0, 0), (1, 0), (0, 1)]
TRI_N = [(0, 0, 1)] * 3


def test_axis_aligned_triangle():
    tangents, bitangents = compute_tangent_basis(TRI, TRI_UV, TRI_N)
    np.testing.assert_allclose(tangents, [[1, 0, 0]] * 3, atol=1e-6)
    np.testing.assert_allclose(bitangents, [[0, 1, 0]] * 3, atol=1e-6)


def test_one_row_per_vertex_and_shared_per_triangle():
    vertices = TRI + [(0, 0, 1), (2, 0, 1), (0, 3, 1)]
    uvs = TRI_UV + [(0, 0), (0.5, 0.1), (0.2, 0.7)]
    normals = TRI_N * 2
    tangents, bitangents = compute_tangent_basis(vertices, uvs, normals)
    assert tangents.shape == (6, 3)
    assert bitangents.shape == (6, 3)
    np.testing.assert_array_equal(bitangents[3], bitangents[4])
    np.testing.assert_array_equal(bitangents[4], bitangents[5])


def test_tangents_are_unit_and_orthogonal_to_normals():
    vertices = [(0, 0, 0), (1, 0.2, 0.1), (0.3, 1, -0.2)]
    uvs = [(0.1, 0.2), (0.9, 0.25), (0.2, 0.8)]
    normals = np.array([(0.1, 0.1, 1), (0, 0.2, 1), (-0.1, 0, 1)], dtype=np.float32)
    normals /= np.linalg.norm(normals, axis=1, keepdims=True)
    tangents, _ = compute_tangent_basis(vertices, uvs, normals)
    np.testing.assert_allclose(np.linalg.norm(tangents, axis=1), 1.0, atol=1e-5)
    np.testing.assert_allclose(np.sum(tangents * normals, axis=1), 0.0, atol=1e-5)


def test_handedness_flips_tangent_for_mirrored_uvs():
    mirrored = [(0, 0), (-1, 0), (0, 1)]
    tangents, bitangents = compute_tangent_basis(TRI, mirrored, TRI_N)
    # The raw tangent points along -x; the handedness check flips it back.
    np.testing.assert_allclose(tangents, [[1, 0, 0]] * 3, atol=1e-6)
    np.testing.assert_allclose(bitangents, [[0, 1, 0]] * 3, atol=1e-6)


def test_vertex_count_not_multiple_of_three_raises():
    with pytest.raises(ValueError):
        compute_tangent_basis(TRI[:2], TRI_UV[:2], TRI_N[:2])


def test_mismatched_attribute_lengths_raise():
    with pytest.raises(ValueError):
        compute_tangent_basis(TRI, TRI_UV, TRI_N[:2])