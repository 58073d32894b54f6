[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eiwidgets"
version = "3.1.0"
description = "A small widget toolkit core: rectangle geometry, software surfaces, alpha compositing, widget trees and a placer geometry manager."
requires-python = ">=3.10"
dependencies = []
keywords = ["widgets", "gui", "geometry manager", "placer", "surface", "compositing"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eiwidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
