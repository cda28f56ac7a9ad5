# MIT License (see LICENSE)
"""
Numeric tolerances shared by every geometric routine.

Floating point coordinates are compared against EPS: two coordinates closer
than EPS are treated as equal, and a cross product smaller than EPS in
magnitude is treated as collinear. Integer coordinates are compared exactly.

EPS is scale dependent. Callers working with very large or very small
coordinate magnitudes should rescale their data or pass their own ``eps=``
to the routines that accept one.
"""
from __future__ import annotations

# Default tolerance for floating point equality and collinearity tests.
EPS: float = 1e-9
