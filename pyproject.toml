[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvesketch"
version = "0.1.0"
description = "Scan-conversion of lines, ellipses, polynomials and polygons, plus Bezier, Catmull-Rom, camera and shape helpers"
requires-python = ">=3.10"
keywords = [
    "rasterization",
    "bresenham",
    "midpoint ellipse",
    "scanline fill",
    "polynomial",
    "bezier",
    "catmull-rom",
    "spline",
    "trackball",
    "computer graphics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["curvesketch"]

[tool.hatch.build.targets.sdist]
include = [
    "curvesketch",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
