[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socnetkit"
version = "0.1.0"
description = "Building blocks for (social) network models: links, link filters, link factories, nodes and network generators."
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "graph", "social network", "small world", "scale free", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Sociology",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
socnetkit-demo = "socnetkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["socnetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
