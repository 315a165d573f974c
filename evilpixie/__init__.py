"""Building blocks for a pixel-art paint program: geometry, path helpers, enumerations, a project listener base, Scale2x, colour ranges and sprite sheets."""

__version__ = "0.3.1"