[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pearlkernel"
version = "0.1.0"
description = "A simulated hobby kernel: text display, keyboard decoder, page allocator, in-memory file system and a small command shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["kernel", "shell", "simulation", "vga", "filesystem", "allocator", "scancode", "smbios"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pearlkernel = "pearlkernel.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["pearlkernel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
