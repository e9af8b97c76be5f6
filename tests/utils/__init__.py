"""Test utilities"""

from .gen_sequences import gen_sequences
from .failing_transform import FailingTransform, TransformError

__all__ = ["gen_sequences", "FailingTransform", "TransformError"]
