[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vehicledemo"
version = "0.1.0"
description = "Scene data and driving logic for a wheeled-vehicle demo: meshes, materials, vehicle and floor settings, driver input and a race clock"
requires-python = ">=3.10"
keywords = ["vehicle", "simulation", "mesh", "driver-input", "game"]
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
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vehicledemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
