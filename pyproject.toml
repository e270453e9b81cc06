[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxideui"
version = "0.1.0"
description = "Declarative UI framework core: widgets, element tree, layout, events, state, animation and software rendering primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "gui", "widgets", "layout", "animation", "reactive", "declarative"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["oxideui"]

[tool.pytest.ini_options]
addopts = "-ra"
