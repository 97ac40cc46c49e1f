"""Grid ray casting, packed pixel images and XPM texture decoding."""

__version__ = "0.1.0"