"""Exception hierarchy for polynomial interpolation."""


class InterpolationError(ValueError):
    """Base class for failures of an interpolation request."""

    pass


class UnequalArrayLengths(InterpolationError):
    """x and y do not hold the same number of samples.

    Checked before any method-specific work, so the message is the same
    whichever method was requested.
    """

    def __init__(self, x_length, y_length):
        self.x_length = x_length
        self.y_length = y_length
        super().__init__(
            f"x and y must have the same length (got {x_length} and {y_length})."
        )


class DuplicateValues(InterpolationError):
    """Two interpolation nodes are numerically indistinguishable.

    Raised the first time a required denominator x[i] - x[j] falls below
    the tolerance. The construction is aborted; no partial result exists.
    """

    def __init__(self, i, j, x_i, x_j):
        self.indices = (i, j)
        self.values = (x_i, x_j)
        super().__init__(
            f"Nodes x[{i}] = {x_i!r} and x[{j}] = {x_j!r} coincide; "
            "interpolation through duplicate nodes is ill-posed."
        )


class EmptyInput(InterpolationError):
    """No samples were given."""

    def __init__(self):
        super().__init__("At least one (x, y) sample is required.")


class NearDuplicateWarning(RuntimeWarning):
    """Two nodes are close enough that the coefficients may be inaccurate."""

    pass
