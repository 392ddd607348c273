"""Kernel value types – Some, Nothing, Option."""

from easy_excel.kernel.types.option import Nothing, Option, Some, option_of

__all__ = ["Nothing", "Option", "Some", "option_of"]
