from .greeting import greet
from .math_utils import add, subtract

__all__ = ["add", "subtract", "greet"]
