"""Grid-based raycasting engine: .cub scene parsing, map checks, ray casting and a pygame viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]