from __future__ import annotations
import numpy as np

# tuned bias near the bit pattern of 1.0 (0x3FEF127F00000000, not 0x3FF0000000000000)
POW_BIAS = 4606921280493453312


def approx_pow(base, exponent: float):
    """Approximate ``base ** exponent`` for ``base > 0``.

    Reinterprets the bits of ``base`` as a 64-bit integer, scales its distance
    from a tuned bias by ``exponent`` and reinterprets the result as a double
    again. The bias sits just below the bits of 1.0, so even
    ``approx_pow(1.0, e)`` is not 1.0. Roughly an order of magnitude faster
    than an exact power on large arrays, and off by up to ~25% in extreme
    cases. The error is deterministic, so runs stay reproducible.

    Works on scalars (returns a float) and on numpy arrays (element-wise).
    """
    arr = np.asarray(base, dtype=np.float64)
    bits = arr.view(np.int64) if arr.ndim else arr.reshape(1).view(np.int64)
    scaled = (exponent * (bits - POW_BIAS)).astype(np.int64) + POW_BIAS
    out = scaled.view(np.float64)
    if arr.ndim == 0:
        return float(out[0])
    return out
