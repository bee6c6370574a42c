[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "platformkit"
version = "0.1.0"
description = "A small side-scrolling platformer framework: sprites, animations, swept-AABB collision and a headless sample level"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "collision", "aabb", "sprites", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
platformkit = "platformkit.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["platformkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
