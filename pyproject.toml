[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "junglerun"
version = "0.1.0"
description = "A side-scrolling arcade game: a monkey dodges falling fruit, fights a crocodile and hunts for the key."
requires-python = ">=3.10"
keywords = ["game", "arcade", "side-scroller", "pygame", "sprites"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
junglerun = "junglerun.manager:main"

[tool.hatch.build.targets.wheel]
packages = ["junglerun"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
