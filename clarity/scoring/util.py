def cap(score: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, score))


def award(condition: bool, points: float) -> float:
    return points if condition else 0
