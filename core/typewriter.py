from itertools import count
from typing import Iterator, List, Tuple

TYPING_MS = 100
DELETING_MS = 50
PAUSE_MS = 2000

Frame = Tuple[str, int]


def typewriter_frames(roles: List[str], typing_ms: int = TYPING_MS, deleting_ms: int = DELETING_MS,
                      pause_ms: int = PAUSE_MS) -> Iterator[Frame]:
    """
    Endless ``(text, delay_ms)`` frames for the hero headline.

    Each role is typed one character at a time, held for ``pause_ms``,
    deleted one character at a time, then the next role starts.
    """
    if not roles:
        return
    for loop in count():
        role = roles[loop % len(roles)]
        for i in range(1, len(role) + 1):
            yield role[:i], typing_ms
        yield role, pause_ms
        for i in range(len(role) - 1, -1, -1):
            yield role[:i], deleting_ms


def typewriter_schedule(roles: List[str], loops: int = 1, **timings) -> List[Frame]:
    """Finite schedule covering ``loops`` full passes over ``roles``."""
    frames_per_loop = sum(2 * len(role) + 1 for role in roles)
    frames = typewriter_frames(roles, **timings)
    return [next(frames) for _ in range(frames_per_loop * loops)] if roles else []
