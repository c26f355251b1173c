__all__ = [
    "__version__",
    "__version_tuple__",
    "version",
    "version_tuple",
]

__version__ = version = "1.0.0"
__version_tuple__ = version_tuple = (1, 0, 0)
