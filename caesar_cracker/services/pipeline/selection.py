from caesar_cracker.services.engines.base import ScoreMap


def select_keys(scores: ScoreMap) -> list[int]:
    """
    Return every key holding the highest score, in ascending order.

    Only the ordering of scores matters, so this works for match counts and
    for membership markers alike. An empty ScoreMap means no viable key.
    """
    best: int | None = None
    keys: list[int] = []

    for key, score in scores.items():
        if best is None or score > best:
            best = score
            keys = [key]
        elif score == best:
            keys.append(key)

    return sorted(keys)
