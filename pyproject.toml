[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ginkgokit"
version = "0.1.0"
description = "Engine building blocks: a typed blackboard, editor settings, transforms, vertex data, a skyline rectangle packer and a text-editing core with undo."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "game engine",
    "transform",
    "rectangle packing",
    "texture atlas",
    "text editing",
    "undo",
    "blackboard",
]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ginkgokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
