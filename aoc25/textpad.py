"""Padding of strings to a fixed length."""


def _repeats(text: str, pad: str, length: int) -> int:
    if not pad:
        raise ValueError("pad must not be empty")
    return max(1, (length - len(text)) // len(pad) + 1)


def pad_right(text: str, pad: str, length: int) -> str:
    """Append ``pad`` at least once, then cut the result to ``length``."""
    return (text + pad * _repeats(text, pad, length))[:length]


def pad_left(text: str, pad: str, length: int) -> str:
    """Prepend ``pad`` at least once, then keep the first ``length`` characters."""
    return (pad * _repeats(text, pad, length) + text)[:length]