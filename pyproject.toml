[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glmeshkit"
version = "0.1.0"
description = "OBJ loading, vertex indexing, tangent space, BMP/DDS parsing, text quads and picking helpers for real-time 3D rendering"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["obj", "mesh", "vbo", "index-buffer", "dds", "bmp", "tangent-space", "picking", "opengl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glmeshkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
