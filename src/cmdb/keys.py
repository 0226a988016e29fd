"""
Dot-notation key paths.

Every value a source exposes is addressed by a key path: the source's prefix
followed by each mapping key traversed to reach the value, joined with ".".

Example:
    >>> join("my", "database")
    'my.database'
    >>> join("", "database")
    'database'
    >>> split("my.database.host")
    ['my', 'database', 'host']
"""

# Separator between the components of a key path
SEPARATOR = "."


def join(prefix: str, *parts: str) -> str:
    """
    Append key components to a key path prefix.

    The separator is omitted only while the path is still empty, so
    join("", "a") == "a", but an empty key under a prefix is kept:
    join("a", "") == "a.". join("a", "b.c") == join("a.b", "c").
    """
    path = prefix
    for part in parts:
        path = f"{path}{SEPARATOR}{part}" if path else part
    return path


def split(key: str) -> list[str]:
    """Split a key path into its components."""
    if not key:
        return []
    return key.split(SEPARATOR)
