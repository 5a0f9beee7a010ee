[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bouncyballs"
version = "0.1.0"
description = "A small arcade toy: palette-animated balls bouncing around the screen, controlled from the keyboard."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "palette", "demo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bouncyballs = "bouncyballs.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bouncyballs"]

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
warn_unused_ignores = true
warn_redundant_casts = true
