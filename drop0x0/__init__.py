"""drop0x0 - drop a file or snippet, get a 0x0.st link on the clipboard."""

__version__ = "0.1.0"
