def ensure_float(value: object, default: float | None = 0.0) -> float | None:
    """Convert a value to float, with a default fallback."""
    try:
        return float(value) if isinstance(value, (int, float, str)) else default
    except (TypeError, ValueError):
        return default


def chunk_bounds(length: int, parts: int) -> list[tuple[int, int]]:
    """Split ``range(length)`` into at most ``parts`` contiguous slices.

    Each slice holds ``ceil(length / parts)`` items except possibly the last.
    Slices that would start past the end are omitted.
    """
    size = -(-length // parts)
    bounds = []
    for start in range(0, length, size):
        bounds.append((start, min(start + size, length)))
    return bounds
