[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vgpreader"
version = "0.1.0"
description = "Framebuffer drawing, bitmap fonts, text layout and a host screen interface for a paged text reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["framebuffer", "bitmap font", "text layout", "monochrome", "grayscale"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["vgpreader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
