"""osutil - helpers for openSUSE package maintainers."""

__version__ = "0.1.0"
