from . import descriptive, hypothesis_test

__all__ = [
    "descriptive",
    "hypothesis_test",
]
