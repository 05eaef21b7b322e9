"""Quick start example: approximate a 2D function on an anisotropic Smolyak grid."""

import math

from pysmolyak import SmolyakApproximation


def f(x, _):
    """A smooth 2D function: sin(x) * exp(-y)."""
    return math.sin(x[0]) * math.exp(-x[1])


# Build interpolant; x needs more resolution than y
sm = SmolyakApproximation(
    f,
    num_dimensions=2,
    domain=[[-3, 3], [0, 2]],
    levels=[5, 4],
)
sm.build()
print(sm)

# Evaluate at a test point
point = [1.0, 0.5]
exact = f(point, None)
approx = sm.eval(point)

print(f"\nExact:  {exact:.10f}")
print(f"Approx: {approx:.10f}")
print(f"Error:  {abs(approx - exact):.2e}")

# Nodes first, values later
info = SmolyakApproximation.nodes(2, [[-3, 3], [0, 2]], [5, 4])
values = [f(list(p), None) for p in info["grid"]]
sm2 = SmolyakApproximation.from_values(values, 2, [[-3, 3], [0, 2]], [5, 4])
print(f"\nfrom_values at {point}: {sm2.eval(point):.10f}")
