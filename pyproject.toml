[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metabolistic"
version = "0.1.0"
description = "Headless simulation of a rolling-sphere character with a follow camera"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "character-controller", "camera", "3d", "quaternion"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metabolistic = "metabolistic.world:main"

[tool.hatch.build.targets.wheel]
packages = ["metabolistic"]

[tool.pytest.ini_options]
addopts = "-ra"
