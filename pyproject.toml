[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huffpress"
version = "0.1.0"
description = "Huffman coding of byte streams, with a small command for compressing and decompressing files"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "entropy coding", "prefix codes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
huffpress = "huffpress.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huffpress"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
