"""Testing helpers – in-memory fakes and Hypothesis strategies."""
from easy_excel.testing.fakes import InMemorySink, InMemorySource
from easy_excel.testing.strategies import (
    descriptor_list_strategy,
    descriptor_strategy,
    shape_strategy,
)

__all__ = [
    "InMemorySink",
    "InMemorySource",
    "descriptor_list_strategy",
    "descriptor_strategy",
    "shape_strategy",
]
