from __future__ import annotations

import math

from _infra import banner

from functors import Either, left, right


def divide(numerator: float, denominator: float) -> Either[Exception, float]:
    # Locality: errors are values here, nothing raises.
    if math.isnan(numerator):
        return left(ValueError("Numerator is not a number."))
    if math.isnan(denominator):
        return left(ValueError("Denominator is not a number."))
    if denominator == 0:
        return left(ZeroDivisionError("Division by zero is not possible."))
    return right(numerator / denominator)


def main() -> None:
    banner("01_divide: Either routes success and error")

    for numerator, denominator in ((10, 2), (10, 0), (math.nan, 5)):
        (
            divide(numerator, denominator)
            .right(lambda result, n=numerator, d=denominator: print(f"{n} / {d} = {result}"))
            .left(lambda error: print(f"error: {error}"))
        )


if __name__ == "__main__":
    main()
