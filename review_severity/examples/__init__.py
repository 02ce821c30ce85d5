"""回归样例"""

from .inputs import EXAMPLE_INPUTS, ExampleInput
from .verify import ExampleMismatch, verify_examples

__all__ = ["EXAMPLE_INPUTS", "ExampleInput", "ExampleMismatch", "verify_examples"]
