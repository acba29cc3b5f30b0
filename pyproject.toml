[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcsbench"
version = "0.1.0"
description = "Longest common subsequence scoring with sequential, block-wavefront and block-grid strategies"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "lcs",
    "longest common subsequence",
    "dynamic programming",
    "sequence alignment",
    "wavefront",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lcs-seq = "lcsbench.sequential:main"
lcs-wavefront = "lcsbench.wavefront:main"
lcs-grid = "lcsbench.grid:main"

[tool.hatch.build.targets.wheel]
packages = ["lcsbench"]

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
