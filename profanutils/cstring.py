"""String and memory helpers with C-library semantics, expressed over str and bytes."""

from __future__ import annotations

_INT_MASK = 0xFFFFFFFF


def int_to_ascii(n: int) -> str:
    """Return the decimal text of ``n``, with a leading minus sign when negative."""
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits


def hex_to_ascii(n: int) -> str:
    """Return ``n`` as lowercase ``0x`` hexadecimal of its 32-bit pattern, without leading zeros."""
    return f"0x{n & _INT_MASK:x}"


def double_to_ascii(n: float) -> str:
    """Render ``n`` with five fractional digits, trailing zeros dropped and one ``0`` appended.

    The integer and fractional parts are converted separately, so leading zeros of
    the fraction are not kept and a negative fraction keeps its own sign.
    """
    int_part = int(n)
    frac_part = int((n - int_part) * 100000)
    text = f"{int_to_ascii(int_part)}.{int_to_ascii(frac_part)}"
    return text.rstrip("0") + "0"


def ascii_to_int(text: str) -> int:
    """Accumulate every character of ``text`` as a decimal digit, without validation."""
    value = 0
    for ch in text:
        value = value * 10 + ord(ch) - ord("0")
    return value


def str_count(text: str, ch: str) -> int:
    """Return how many times the character ``ch`` occurs in ``text``."""
    return sum(1 for c in text if c == ch)


def str_start_split(text: str, delim: str) -> str:
    """Return the part of ``text`` before the first ``delim``, or all of it."""
    return text.partition(delim)[0]


def str_end_split(text: str, delim: str) -> str:
    """Return the part of ``text`` after the first ``delim``, or all of it when absent."""
    head, sep, tail = text.partition(delim)
    return tail if sep else head


def str_delchar(text: str, ch: str) -> str:
    """Return ``text`` with every occurrence of ``ch`` removed."""
    return text.replace(ch, "")


def str_in_str(haystack: str, needle: str) -> bool:
    """Tell whether ``needle`` starts at a position before ``len(haystack) - len(needle)``.

    A needle placed exactly at the end of the haystack is not found.
    """
    return any(haystack.startswith(needle, i) for i in range(len(haystack) - len(needle)))


def str_cmp(a: str, b: str) -> int:
    """Compare two strings: -1 when lengths differ, else the first code-point difference or 0."""
    if len(a) != len(b):
        return -1
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    return 0


def basename(path: str) -> str:
    """Return everything after the last ``/`` of ``path``."""
    return path.rpartition("/")[2]


def dirname(path: str) -> str:
    """Return the directory part of ``path``, ``"."`` when there is none."""
    size = len(path)
    last = 0
    pos = 0
    while True:
        while pos < size and path[pos] != "/":
            pos += 1
        first = pos
        while pos < size and path[pos] == "/":
            pos += 1
        if pos < size:
            last = first
            continue
        break
    if last == 0:
        if not path or path[0] != "/":
            return "."
        last = 1
        if last < size and path[last] == "/" and last + 1 == size:
            last += 1
    return path[:last]


def memccpy(src: bytes, stop: int, n: int) -> bytes | None:
    """Return the bytes of ``src`` up to and including ``stop``, or None if not within ``n``."""
    stop &= 0xFF
    window = src[:n]
    index = window.find(bytes([stop]))
    if index < 0:
        return None
    return window[: index + 1]


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Return the difference of the first unequal byte pair within ``n`` bytes, or 0."""
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memmem(haystack: bytes, needle: bytes) -> int | None:
    """Return the offset of ``needle`` in ``haystack``, or None."""
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def memrchr(data: bytes, value: int, n: int) -> int | None:
    """Return the offset of the last byte equal to ``value`` in the first ``n`` bytes, or None."""
    index = data[:n].rfind(bytes([value & 0xFF]))
    return None if index < 0 else index


def strpbrk(text: str, accept: str) -> int | None:
    """Return the index of the first character of ``text`` found in ``accept``, or None."""
    return next((i for i, ch in enumerate(text) if ch in accept), None)


def strrchr(text: str, ch: str) -> int | None:
    """Return the index of the last ``ch`` in ``text``; the NUL character matches the end."""
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnlen(text: str, maxlen: int) -> int:
    """Return the length of ``text`` before any NUL, at most ``maxlen``."""
    return min(len(text.partition("\0")[0]), maxlen)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters including the terminator.

    Returns the new text and the length the full result would have had; when ``dst``
    already fills the buffer it is left as is and ``size + len(src)`` is returned.
    """
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def stpncpy(src: str, n: int) -> tuple[str, int]:
    """Copy at most ``n`` characters of ``src``, padding with NUL to ``n``.

    Returns the buffer and the offset just past the copied characters.
    """
    copied = src[:n]
    return copied.ljust(n, "\0"), len(copied)