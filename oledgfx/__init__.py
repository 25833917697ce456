"""Frame buffer, fonts, shapes, text and a bit-banged I2C driver for 128x64 monochrome OLED displays."""

__version__ = "2.0.0"
__all__ = ["canvas", "demo", "device", "fonts", "shapes", "text"]