"""Heat legend example.

Run directly with:
    python examples/heat_legend.py
"""
import numpy as np

from chromascale import GradientEvaluator
from chromascale.samples.colors import HEAT_STOPS, BLACK


def demonstrate_scalar() -> None:
    # 0x000F..0xFFF0 spread over six stops, black for anything outside.
    grad = GradientEvaluator()
    grad.initialize(0x000F, 0xFFF0, HEAT_STOPS, BLACK, BLACK)

    for value in (0x0000, 0x000F, 0x4000, 0x8000, 0xC000, 0xFFF0, 123456):
        color = grad.evaluate(value)
        print(f"{value:>6} -> {color.to_hex()} {color.value}")


def demonstrate_legend() -> None:
    # One row of a legend image, ready to hand to an image library.
    grad = GradientEvaluator(0, 255, HEAT_STOPS, rounding="nearest")
    row = grad.evaluate_many(np.arange(256))
    print("legend row:", row.shape, row.dtype)
    print("first/middle/last:", row[0], row[128], row[-1])


if __name__ == "__main__":
    demonstrate_scalar()
    demonstrate_legend()
