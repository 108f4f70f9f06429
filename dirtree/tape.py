"""Reading space-separated words from a command tape terminated by ';'."""

from __future__ import annotations

from collections.abc import Iterator

END_OF_TAPE = ";"


def has_eop(tape: str) -> bool:
    """Return True when the tape ends with the end-of-tape marker."""
    return tape.endswith(END_OF_TAPE)


def iter_words(tape: str) -> Iterator[str]:
    """Yield the words of the tape up to the first end-of-tape marker.

    Words are separated by one or more spaces; anything after the
    marker is ignored.
    """
    body, _, _ = tape.partition(END_OF_TAPE)
    for word in body.split(" "):
        if word:
            yield word


def take_words(tape: str, count: int) -> list[str]:
    """Return exactly ``count`` words from the tape.

    Reading past the end of the tape yields empty words, so the result
    is padded with empty strings when the tape holds fewer words.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    words: list[str] = []
    for word in iter_words(tape):
        if len(words) == count:
            break
        words.append(word)
    words.extend("" for _ in range(count - len(words)))
    return words