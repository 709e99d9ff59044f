"""Polynomial interpolation by Lagrange's and Newton's formulas."""

from polyinterp.errors import (
    DuplicateValues,
    EmptyInput,
    InterpolationError,
    NearDuplicateWarning,
    UnequalArrayLengths,
)
from polyinterp.interpolation import Method, interpolate
from polyinterp.nodes import generate_nodes
from polyinterp.polynomial import Polynomial
