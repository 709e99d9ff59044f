import logging

import numpy as np

from polyinterp.errors import InterpolationError
from polyinterp.interpolation import Method, interpolate
from polyinterp.nodes import generate_nodes

logging.basicConfig(level=logging.INFO)


def run_example(name, x, y):
    print(f"--- {name} ---")
    for method in Method:
        try:
            polynomial = interpolate(x, y, method)
        except InterpolationError as e:
            logging.error(f"{method.value} interpolation failed: {e}")
            continue
        print(f"  {method.value:>8}: {polynomial}")
    print()


if __name__ == "__main__":
    run_example("x^2 + 1", [0.0, 1.0, 2.0], [1.0, 2.0, 5.0])
    run_example("constant", [3.0], [7.0])
    run_example("2x", [0.0, 2.0], [0.0, 4.0])

    nodes = generate_nodes(6, -1.0, 1.0, spacing_type="chebyshev")
    run_example("arctan on 6 Chebyshev nodes", nodes, np.arctan(nodes))

    run_example("duplicate nodes", [1.0, 1.0], [2.0, 3.0])
