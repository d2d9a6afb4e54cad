# axis-aligned rectangle helpers


def clamp(x, lo, hi):
    # lo wins when the range is empty (area narrower than the thing clamped)
    return max(lo, min(hi, x))


def overlaps(a, b):
    """true when two x/y/width/height boxes share any area; touching edges count."""
    return not (
        a.x + a.width < b.x
        or a.x > b.x + b.width
        or a.y + a.height < b.y
        or a.y > b.y + b.height
    )
