[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledgfx"
version = "2.0.0"
description = "Frame buffer, fonts, shapes and a bit-banged I2C driver for 128x64 monochrome OLED displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["oled", "ssd1306", "framebuffer", "bitmap", "font", "i2c", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oledgfx-demo = "oledgfx.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["oledgfx"]

[tool.pytest.ini_options]
addopts = "-ra"
