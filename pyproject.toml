[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tarjankit"
version = "0.1.0"
description = "Directed graphs, strongly connected component building blocks, graph generators and a perfect-number search"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "tarjan",
    "strongly connected components",
    "scc",
    "random graphs",
    "perfect numbers",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tarjankit-perfect = "tarjankit.perfect:main"

[tool.hatch.build.targets.wheel]
packages = ["tarjankit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
