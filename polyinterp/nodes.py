import numpy as np
from scipy.special import roots_legendre

SPACING_TYPES = ("equally_spaced", "chebyshev", "gauss_legendre")


def scale_nodes(nodes, start, stop):
    # scale the nodes from [-1, 1] to [start, stop]
    return 0.5 * (stop - start) * (nodes + 1) + start


def equally_spaced_nodes(n, start, stop):
    if n == 1:
        return np.array([0.5 * (start + stop)])
    return np.linspace(start, stop, n, dtype=np.float64)


def chebyshev_nodes_second_kind(n, start, stop):
    """
    Chebyshev points of the second kind (extrema of T_{n-1}), endpoints included.

    Interpolating through these instead of equally spaced points keeps the
    Runge oscillation near the interval ends in check.
    """
    if n == 1:
        return np.array([0.5 * (start + stop)])
    k = np.arange(n, dtype=np.float64)  # 0, 1, 2, ..., n-1
    nodes = np.cos(np.pi * k / (n - 1))  # in [-1, 1]
    return np.sort(scale_nodes(nodes, start, stop))


def gauss_legendre_nodes(n, start, stop):
    # roots of the degree n Legendre polynomial, interior of (start, stop)
    # _ are quadrature weights, not needed for interpolation
    nodes, _ = roots_legendre(n)
    return np.sort(scale_nodes(nodes, start, stop))


def generate_nodes(n, start, stop, spacing_type="chebyshev"):
    """
    Generate n interpolation nodes on [start, stop].

    Args:
        n (int): Number of nodes, at least 1.
        start (float): Left end of the interval.
        stop (float): Right end of the interval.
        spacing_type (str): One of "equally_spaced", "chebyshev", "gauss_legendre".

    Returns:
        numpy.ndarray: Sorted float64 nodes.
    """
    if n < 1:
        raise ValueError("At least one node is required.")

    if spacing_type == "equally_spaced":
        return equally_spaced_nodes(n, start, stop)
    elif spacing_type == "chebyshev":
        return chebyshev_nodes_second_kind(n, start, stop)
    elif spacing_type == "gauss_legendre":
        return gauss_legendre_nodes(n, start, stop)
    else:
        raise ValueError("Unsupported spacing type. Use 'equally_spaced', 'chebyshev' or 'gauss_legendre'.")
