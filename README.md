# glmeshkit

This package prepares geometry and textures for a real-time 3D renderer. It
is plain Python with numpy. It needs no graphics context. Every function takes
data and returns data, and the results are ready to upload to a GPU.

## Modules

### `glmeshkit.objloader`

A small Wavefront OBJ reader.

- `parse_obj(text)` reads `v`, `vt`, `vn` and `f` lines and skips every other
  line.
  - Faces must be written as `v/t/n` corners. Only the first three corners of
  a face are used.
  - The V texture coordinate is negated, which suits DDS textures.
  - The result is an `ObjMesh` holding flat, de-indexed float32 arrays
  (`vertices`, `uvs`, `normals`). Every three rows make one triangle.
  `len(mesh)` gives the vertex count.
- `load_obj(path)` reads a file and parses it.
- `ObjLoadError` is raised when the file cannot be opened. It is also raised
  for a face that is not three `v/t/n` corners, a malformed number, or an
  index out of range.

### `glmeshkit.vboindexer`

Builds an index buffer by merging duplicate vertices. The indices are
`uint16`. If there are more than 65536 distinct vertices, `ValueError` is
raised.

- `index_vbo(vertices, uvs, normals)` merges only vertices whose attributes are
  bit-identical.
- `index_vbo_slow(vertices, uvs, normals)` merges vertices whose position, UV
  and normal components each differ by less than 0.01. Each vertex is matched
  to the first such vertex already kept.
- `index_vbo_tbn(vertices, uvs, normals, tangents, bitangents)` merges the same
  way as `index_vbo_slow`. It also sums the tangents and bitangents of merged
  vertices.
- Results come back as `IndexedMesh` (`indices`, `vertices`, `uvs`,
  `normals`) or as `IndexedTBNMesh`, which adds `tangents` and `bitangents`.
- Helpers:
  - `is_near(a, b)` is the 0.01 test.
  - `find_similar_vertex(...)` returns the index of the first matching output
    vertex, or `None`.

### `glmeshkit.tangentspace`

- `compute_tangent_basis(vertices, uvs, normals)` returns
  `(tangents, bitangents)` with one row per vertex of a flat triangle list.
  - Each triangle's three vertices share that triangle's tangent and bitangent.
  - Tangents are made orthogonal to the normal (Gram-Schmidt) and normalised.
  - A tangent is flipped where `cross(normal, tangent)` points away from the
    bitangent.
- The vertex count must be a multiple of 3.

### `glmeshkit.texture`

Readers for 24-bit BMP files and DXT-compressed DDS files.

- `parse_bmp(data)` and `read_bmp(path)` return a `BmpImage` (`width`,
  `height`, `data`). `data` holds BGR pixels with the bottom row first.
  - Only uncompressed 24 bits-per-pixel files are accepted.
  - The pixels are taken to follow the 54-byte header.
  - A zero image size in the header is read as `width * height * 3`.
- `parse_dds(data)` and `read_dds(path)` return a `DdsImage` (`width`,
  `height`, `format`, `mipmap_count`, `levels`). Each `MipLevel` carries
  `level`, `width`, `height` and the compressed `data`.
- `DdsFormat` is `DXT1`, `DXT3` or `DXT5`. It provides `block_size`,
  `components` and `gl_internal_format`.
- `bmp_header(width, height)` builds the 54-byte header for writing raw BGR
  pixels as a BMP file.
- Files that are missing, truncated or unsupported raise `TextureError`.

### `glmeshkit.text2d`

Geometry for drawing text from a 16x16 glyph atlas.

- `text_quads(text, x, y, size)` returns `(vertices, uvs)`. Each character
  gets six rows (two triangles). The characters are laid left to right as
  squares of side `size`, starting at `(x, y)`.
- `glyph_uv(character)` gives the top-left atlas coordinate of a character's
  cell.
  - Only character codes 0..255 are accepted.
  - Codes above 127 wrap to negative values, as a signed byte does.

### `glmeshkit.picking`

- `screen_pos_to_world_ray(mouse_x, mouse_y, screen_width, screen_height, view_matrix, projection_matrix)`
  returns `(origin, direction)`.
  - The mouse position is in pixels from the bottom-left corner.
  - The origin lies on the near plane. The direction is normalised.
  - Matrices act on column vectors.
- `ray_obb_intersection(ray_origin, ray_direction, aabb_min, aabb_max, model_matrix)`
  returns the distance to an oriented box, or `None` on a miss. A ray that
  starts inside the box gives 0.
- `pick_obb(ray_origin, ray_direction, model_matrices, aabb_min, aabb_max)`
  returns the index of the first box hit, in the order given, or `None`. The
  box defaults to -1..1 on every axis.

### `glmeshkit.colorpick`

Colour-coded picking.

- `picking_color(index)` encodes an id in 0..0xFFFFFF as an RGBA colour in
  [0, 1]. Red holds the lowest byte and blue the highest.
- `picked_id(red, green, blue)` decodes the bytes of a pixel that was read
  back.
- `pick_message(picked)` returns `"background"` for `BACKGROUND_ID` (full
  white) and `"mesh <id>"` otherwise.

## Examples

```python
from glmeshkit.objloader import load_obj
from glmeshkit.vboindexer import index_vbo

mesh = load_obj("suzanne.obj")
indexed = index_vbo(mesh.vertices, mesh.uvs, mesh.normals)
print(len(indexed.indices), "indices,", len(indexed.vertices), "unique vertices")
```

```python
import numpy as np
from glmeshkit.picking import screen_pos_to_world_ray, pick_obb

view = np.eye(4)
projection = np.eye(4)
model = np.eye(4)
model[:3, 3] = (0.0, 0.0, 5.0)

origin, direction = screen_pos_to_world_ray(512, 384, 1024, 768, view, projection)
print(pick_obb(origin, direction, [model]))  # 0
```

## What it does not do

The package does no drawing. It also does not do any of the following:

- open windows
- compile shaders
- upload buffers or textures to a GPU
- handle keyboard or mouse input
- keep a camera

It does not decompress DXT data. `parse_dds` returns the compressed blocks as
they are. Call these functions from your own rendering code and pass their
arrays and bytes to the graphics API of your choice.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```