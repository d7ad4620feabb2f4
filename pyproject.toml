[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtscene"
version = "0.1.0"
description = "Scene-file parsing for a small ray tracer, with XPM image reading, X11 colour names and a pixel buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "scene", "xpm", "parser", "framebuffer", "x11 colours"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtscene = "rtscene.parser:main"

[tool.hatch.build.targets.wheel]
packages = ["rtscene"]

[tool.pytest.ini_options]
addopts = "-ra"
