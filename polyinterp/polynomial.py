from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Polynomial:
    """
    Dense polynomial, coefficients ordered low degree first.

    coefficients[i] is the weight of x**i. Leading zeros are kept, so an
    interpolant through n points always has n coefficients.
    """
    degree: int
    coefficients: np.ndarray

    def __post_init__(self):
        coefficients = np.array(self.coefficients, dtype=np.float64)
        if coefficients.ndim != 1:
            raise ValueError("Coefficients must be a one-dimensional sequence.")
        if self.degree < 0 or len(coefficients) != self.degree + 1:
            raise ValueError(
                f"A degree {self.degree} polynomial needs {self.degree + 1} coefficients, "
                f"got {len(coefficients)}."
            )
        coefficients.flags.writeable = False
        object.__setattr__(self, 'coefficients', coefficients)

    @classmethod
    def from_coefficients(cls, coefficients):
        coefficients = np.asarray(coefficients, dtype=np.float64)
        return cls(degree=len(coefficients) - 1, coefficients=coefficients)

    def to_list(self):
        return self.coefficients.tolist()

    def __len__(self):
        return len(self.coefficients)

    # compares coefficients exactly, no tolerance
    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.degree == other.degree and np.array_equal(self.coefficients, other.coefficients)

    def __hash__(self):
        return hash((self.degree, self.coefficients.tobytes()))

    def __repr__(self):
        return f"Polynomial(degree={self.degree}, coefficients={self.to_list()})"


# ------------------------------------ COEFFICIENT ARITHMETIC ------------------------------------ #

def multiply_linear(coefficients, root, denominator=None):
    """
    Multiply a polynomial by the linear factor (x - root).

    Args:
        coefficients (array_like): Coefficients c[0..m), low degree first.
        root (float): The root r of the factor (x - r).
        denominator (float, optional): If given, every resulting coefficient is
            divided by it in the same step. Used to build Lagrange basis terms.

    Returns:
        numpy.ndarray: m + 1 coefficients with c'[k] = c[k-1] - r * c[k].
    """
    coefficients = np.asarray(coefficients, dtype=np.float64)
    result = np.zeros(len(coefficients) + 1)
    result[1:] = coefficients
    result[:-1] -= root * coefficients
    if denominator is not None:
        result /= denominator
    return result


def add_coefficients(a, b):
    """Coefficient-wise sum; the shorter vector is zero-padded at the high-degree end."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if len(a) < len(b):
        a, b = b, a
    result = a.copy()
    result[:len(b)] += b
    return result


def scale_coefficients(coefficients, factor):
    return np.asarray(coefficients, dtype=np.float64) * factor
