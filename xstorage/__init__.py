"""Composition function for XSeCaStorage composite resources."""

from .function import CompositionFunction
from .scheme import Scheme, new_scheme

__all__ = ["CompositionFunction", "Scheme", "new_scheme"]

__version__ = "0.1.0"
