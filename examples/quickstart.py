from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    import math
    import operator

    from numerical_methods import (
        bisect,
        decompose,
        false_position,
        fixed_point,
        gold,
        naive_gauss,
        newton_raphson,
    )

    print("bisect:", bisect(lambda x: x**2 - 1, 0, 2, 0.5, 10, 0).root)
    print("false position:", false_position(lambda x: x**2 - 1, 0, 2, 0.5, 100, 0).root)

    fp = fixed_point(lambda x: math.exp(-x), 0, 0.5, 10)
    print("fixed point:", fp.root, "(converged=", fp.converged, ")")
    print("newton:", newton_raphson(lambda x: math.exp(-x) - x, 0, 0.5, 10).root)

    f = lambda x: 2 * math.sin(x) - x**2 / 10  # noqa: E731
    print("gold (max):", gold(0, 4, 8, 0.01, f).x_opt)
    print("gold (min):", gold(-2, 1, 50, 0.01, f, operator.lt).x_opt)

    a = [[3, -0.1, -0.2], [0.1, 7, -0.3], [0.3, -0.2, 10]]
    b = [7.85, -19.3, 71.4]
    print("gauss:", naive_gauss(a, b).x)

    lu = decompose(a)
    print("lu:", lu.solve(b).x, "det=", lu.determinant())

    bad = naive_gauss([[1, 2, 3], [4, 5, 6]], [1, 2])
    print("non-square:", bad.error_kind, bad.error)
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
