def is_valid_count(n: int) -> bool:
    return isinstance(n, int) and n >= 1


def is_valid_range(lo: int, hi: int) -> bool:
    return hi - lo + 1 > 0
