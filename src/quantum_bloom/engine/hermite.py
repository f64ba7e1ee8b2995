"""Physicists' Hermite polynomials via the three-term recurrence.

    H_0(x) = 1
    H_1(x) = 2x
    H_k(x) = 2x * H_{k-1}(x) - 2(k-1) * H_{k-2}(x)
"""
from __future__ import annotations

import numpy as np

from quantum_bloom.types.system import Real


def hermite(n: int, x: Real) -> Real:
    """Evaluate H_n at ``x`` (scalar or array) in O(n) time and O(1) extra space."""
    if n < 0:
        raise ValueError(f"Hermite order must be non-negative, got {n}")
    if n == 0:
        return np.ones_like(x, dtype=float) if isinstance(x, np.ndarray) else 1.0
    H_prev2 = np.ones_like(x, dtype=float) if isinstance(x, np.ndarray) else 1.0
    H_prev1 = 2.0 * x
    for k in range(2, n + 1):
        H_curr = 2.0 * x * H_prev1 - 2.0 * (k - 1) * H_prev2
        H_prev2 = H_prev1
        H_prev1 = H_curr
    return H_prev1
