[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mandelpar"
version = "0.1.0"
description = "Render Mandelbrot set images to PPM files, either serially or split across worker processes that share memory."
requires-python = ">=3.10"
dependencies = []
keywords = ["mandelbrot", "fractal", "ppm", "multiprocessing", "shared-memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pmandel = "mandelpar.pmandel:main"
mandel = "mandelpar.single:main"
mandelc = "mandelpar.worker:main"

[tool.hatch.build.targets.wheel]
packages = ["mandelpar"]

[tool.pytest.ini_options]
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
