"""C-style runtime helpers, an in-memory file system with file commands, and small demo programs."""

__version__ = "0.1.0"

__all__ = [
    "canvas",
    "colortext",
    "commands",
    "cstdlib",
    "cstring",
    "hanoi",
    "life",
    "lineedit",
    "livra",
    "mandel",
    "power4",
    "primes",
    "raycast",
    "timeutil",
    "vfs",
    "wirecube",
]