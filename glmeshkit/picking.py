"""Mouse picking: unproject a screen position and test rays against oriented boxes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

__all__ = ["screen_pos_to_world_ray", "ray_obb_intersection", "pick_obb"]

_PARALLEL_EPSILON = 0.001
_FAR_LIMIT = 100000.0


def _matrix(value, name: str) -> np.ndarray:
    matrix = np.asarray(value, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError(f"{name} must be a 4x4 matrix")
    return matrix


def _vec3(value, name: str) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have three components")
    return vector


def _unproject(inverse: np.ndarray, point: np.ndarray) -> np.ndarray:
    result = inverse @ point
    return result / result[3]


def screen_pos_to_world_ray(
    mouse_x: float,
    mouse_y: float,
    screen_width: float,
    screen_height: float,
    view_matrix,
    projection_matrix,
) -> tuple[np.ndarray, np.ndarray]:
    """Return (origin, direction) of the world-space ray through a screen position.

    The mouse position is in pixels from the bottom-left corner. The origin
    lies on the near plane; the direction is normalised. Matrices act on
    column vectors (``matrix @ point``).
    """
    if screen_width == 0 or screen_height == 0:
        raise ValueError("screen size must not be zero")
    view = _matrix(view_matrix, "view_matrix")
    projection = _matrix(projection_matrix, "projection_matrix")

    ndc_x = (mouse_x / screen_width - 0.5) * 2.0
    ndc_y = (mouse_y / screen_height - 0.5) * 2.0
    start_ndc = np.array([ndc_x, ndc_y, -1.0, 1.0])
    end_ndc = np.array([ndc_x, ndc_y, 0.0, 1.0])

    inverse_projection = np.linalg.inv(projection)
    inverse_view = np.linalg.inv(view)

    start_world = _unproject(inverse_view, _unproject(inverse_projection, start_ndc))
    end_world = _unproject(inverse_view, _unproject(inverse_projection, end_ndc))

    direction = end_world[:3] - start_world[:3]
    direction = direction / np.linalg.norm(direction)
    return start_world[:3].copy(), direction


def ray_obb_intersection(
    ray_origin,
    ray_direction,
    aabb_min,
    aabb_max,
    model_matrix,
) -> float | None:
    """Distance along the ray to an oriented bounding box, or None on a miss.

    The box is ``aabb_min``..``aabb_max`` in model space, placed in the world
    by ``model_matrix``. ``ray_direction`` must be normalised. A ray starting
    inside the box gives a distance of 0.
    """
    origin = _vec3(ray_origin, "ray_origin")
    direction = _vec3(ray_direction, "ray_direction")
    box_min = _vec3(aabb_min, "aabb_min")
    box_max = _vec3(aabb_max, "aabb_max")
    model = _matrix(model_matrix, "model_matrix")

    t_min = 0.0
    t_max = _FAR_LIMIT
    delta = model[:3, 3] - origin

    for axis_index in range(3):
        axis = model[:3, axis_index]
        e = float(np.dot(axis, delta))
        f = float(np.dot(direction, axis))
        low, high = float(box_min[axis_index]), float(box_max[axis_index])

        if abs(f) > _PARALLEL_EPSILON:
            t1, t2 = sorted(((e + low) / f, (e + high) / f))
            t_max = min(t_max, t2)
            t_min = max(t_min, t1)
            if t_max < t_min:
                return None
        elif -e + low > 0.0 or -e + high < 0.0:
            # Ray parallel to this pair of planes and outside the slab.
            return None

    return t_min


def pick_obb(
    ray_origin,
    ray_direction,
    model_matrices: Iterable,
    aabb_min: Sequence[float] = (-1.0, -1.0, -1.0),
    aabb_max: Sequence[float] = (1.0, 1.0, 1.0),
) -> int | None:
    """Index of the first box, in the given order, hit by the ray; None if none is."""
    for index, model in enumerate(model_matrices):
        if ray_obb_intersection(ray_origin, ray_direction, aabb_min, aabb_max, model) is not None:
            return index
    return None