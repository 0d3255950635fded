import numpy as np

SUGGESTED_RADIAL_RANGE = (0.0, 100.0)


def close_loop(values) -> np.ndarray:
    """Repeat the first point at the end so polar traces join up."""
    v = np.asarray(values)
    if v.size < 3:
        return v
    return np.concatenate([v, v[:1]])


def suggested_radial_range(values, suggested=SUGGESTED_RADIAL_RANGE) -> tuple[float, float]:
    """Suggested bounds, widened only when the data falls outside them."""
    v = np.asarray(values, dtype=float)
    v = v[np.isfinite(v)]
    low, high = float(suggested[0]), float(suggested[1])
    if v.size == 0:
        return low, high
    return min(low, float(np.min(v))), max(high, float(np.max(v)))
