import logging
import warnings
from enum import Enum

import numpy as np

from polyinterp.errors import DuplicateValues, EmptyInput, NearDuplicateWarning, UnequalArrayLengths
from polyinterp.polynomial import Polynomial, add_coefficients, multiply_linear, scale_coefficients

logger = logging.getLogger(__name__)

# smallest increment above 1.0 for float64
EPSILON = np.finfo(np.float64).eps

DEFAULT_PARAMS = {
    "tolerance": EPSILON,
    "near_duplicate_tolerance": np.sqrt(EPSILON),
    "warn_near_duplicates": True,
}


class Method(Enum):
    LAGRANGE = "lagrange"
    NEWTON = "newton"


def resolve_method(method):
    if isinstance(method, Method):
        return method
    if isinstance(method, str):
        for m in Method:
            if m.value == method.lower():
                return m
    raise ValueError(f"Unsupported interpolation method {method!r}. Use 'lagrange' or 'newton'.")


def resolve_params(params=None):
    if params is None:
        return dict(DEFAULT_PARAMS)
    unknown = set(params) - set(DEFAULT_PARAMS)
    if unknown:
        raise ValueError(f"Unknown interpolation parameters: {sorted(unknown)}")
    return {key: params.get(key, default) for key, default in DEFAULT_PARAMS.items()}


#--------------------------------------VALIDATION--------------------------------------#

def validate_samples(x, y):
    """
    Convert the samples to float64 arrays and check that they pair up.

    Raises:
        ValueError: x or y is not one-dimensional, or holds inf or nan.
        UnequalArrayLengths: len(x) != len(y).
        EmptyInput: no samples at all.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.ndim != 1 or y.ndim != 1:
        raise ValueError("x and y must be one-dimensional sequences.")
    if len(x) != len(y):
        raise UnequalArrayLengths(len(x), len(y))
    if len(x) == 0:
        raise EmptyInput()
    if not np.all(np.isfinite(x)) or not np.all(np.isfinite(y)):
        raise ValueError("x and y must contain only finite values.")
    return x, y


def check_node_spacing(x, tolerance=EPSILON, near_duplicate_tolerance=np.sqrt(EPSILON)):
    """
    Warn once if two nodes are closer than near_duplicate_tolerance relative to
    their magnitude. Pairs below the absolute tolerance are left to the
    constructors, which raise DuplicateValues for them.
    """
    if len(x) < 2:
        return
    order = np.argsort(x, kind="stable")
    sorted_nodes = x[order]
    gaps = np.diff(sorted_nodes)
    if np.any(gaps < tolerance):
        return
    scale = np.maximum(1.0, np.maximum(np.abs(sorted_nodes[:-1]), np.abs(sorted_nodes[1:])))
    close = gaps < near_duplicate_tolerance * scale
    if np.any(close):
        k = int(np.argmax(close))
        i, j = int(order[k]), int(order[k + 1])
        warnings.warn(
            f"Nodes x[{i}] = {float(x[i])!r} and x[{j}] = {float(x[j])!r} are nearly equal; "
            "the interpolating coefficients may be inaccurate.",
            NearDuplicateWarning,
            stacklevel=3,
        )


#----------------------------------------LAGRANGE----------------------------------------#

def lagrange_interpolation(x, y, tolerance=EPSILON):
    """
    Interpolating polynomial as the sum of y[i] * L_i, where
    L_i(x) = prod_{j != i} (x - x[j]) / (x[i] - x[j]).

    Each L_i is built up from [1], one linear factor at a time, dividing by
    the factor's denominator in the same step.
    """
    x = np.asarray(x, dtype=np.float64)
    n = len(x)
    coefficients = np.zeros(n)

    for i in range(n):
        basis = np.ones(1)
        for j in range(n):
            if i == j:
                continue
            denominator = x[i] - x[j]
            if abs(denominator) < tolerance:
                raise DuplicateValues(i, j, float(x[i]), float(x[j]))
            basis = multiply_linear(basis, x[j], denominator)

        coefficients = add_coefficients(coefficients, scale_coefficients(basis, y[i]))

    return Polynomial(degree=n - 1, coefficients=coefficients)


#-----------------------------------------NEWTON-----------------------------------------#

def divided_differences(x, y, tolerance=EPSILON):
    """
    Newton divided differences, computed in place over a copy of y.

    Args:
        x (array_like): The nodes.
        y (array_like): The values at the nodes.
        tolerance (float): Denominators with absolute value below this raise DuplicateValues.

    Returns:
        numpy.ndarray: d with d[i] = f[x_0, ..., x_i].
    """
    x = np.asarray(x, dtype=np.float64)
    d = np.array(y, dtype=np.float64)
    n = len(d)

    for order in range(1, n):
        # descending, so d[i - 1] still holds the previous order
        for i in range(n - 1, order - 1, -1):
            denominator = x[i] - x[i - order]
            if abs(denominator) < tolerance:
                raise DuplicateValues(i - order, i, float(x[i - order]), float(x[i]))
            d[i] = (d[i] - d[i - 1]) / denominator

    return d


def newton_interpolation(x, y, tolerance=EPSILON):
    """
    Interpolating polynomial in Newton form,
    P(x) = d[0] + sum_i d[i] * prod_{j < i} (x - x[j]), expanded to coefficients.
    """
    x = np.asarray(x, dtype=np.float64)
    n = len(x)
    d = divided_differences(x, y, tolerance)

    coefficients = d[:1].copy()
    basis = np.ones(1)
    for i in range(1, n):
        basis = multiply_linear(basis, x[i - 1])
        coefficients = add_coefficients(coefficients, scale_coefficients(basis, d[i]))

    return Polynomial(degree=n - 1, coefficients=coefficients)


#---------------------------------------ENTRY POINT---------------------------------------#

def interpolate(x, y, method, params=None):
    """
    Compute the unique polynomial of degree <= n - 1 through the n points (x[i], y[i]).

    Args:
        x (array_like): Interpolation nodes, expected to be distinct.
        y (array_like): Values at the nodes.
        method (Method or str): Method.LAGRANGE / "lagrange" or Method.NEWTON / "newton".
        params (dict, optional): Overrides for "tolerance", "near_duplicate_tolerance"
            and "warn_near_duplicates".

    Returns:
        Polynomial: degree n - 1, n coefficients ordered low degree first.

    Raises:
        UnequalArrayLengths: len(x) != len(y), whatever the method.
        EmptyInput: no samples.
        DuplicateValues: two nodes coincide within the tolerance.
    """
    x, y = validate_samples(x, y)
    method = resolve_method(method)
    params = resolve_params(params)

    if params["warn_near_duplicates"]:
        check_node_spacing(x, params["tolerance"], params["near_duplicate_tolerance"])

    logger.debug("%s interpolation through %d points", method.value, len(x))

    if method is Method.LAGRANGE:
        polynomial = lagrange_interpolation(x, y, params["tolerance"])
    elif method is Method.NEWTON:
        polynomial = newton_interpolation(x, y, params["tolerance"])

    logger.debug("Constructed polynomial of degree %d", polynomial.degree)
    return polynomial
