"""Integer matrix scripts: literals, addition, multiplication and transpose."""

__version__ = "0.1.0"
__all__ = ["matrix", "tree", "expression", "script"]