[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "physim"
version = "0.1.0"
description = "A small 2D particle physics simulation with elastic collisions, gravity and wall friction"
requires-python = ">=3.10"
keywords = ["physics", "simulation", "particles", "collision", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
physim = "physim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["physim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
