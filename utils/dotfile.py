"""Property-style dotfile reader (``key: value`` per line)."""

from __future__ import annotations

from pathlib import Path

from utils.visualpasses.errors import FileError


def read_dotfile(path: str | Path) -> dict[str, str]:
    """
    Read a dotfile into a string mapping.

    Blank lines and lines starting with '#' are ignored. Each remaining line
    is split on the first ':' and both halves are trimmed; lines without a
    ':' are skipped. A repeated key keeps its last value.

    Args:
        path: File to read

    Returns:
        Dict of key/value pairs

    Raises:
        FileError: If the file cannot be opened, read or decoded
    """
    values: dict[str, str] = {}

    try:
        with open(path, encoding='utf-8') as f:
            for raw_line in f:
                line = raw_line.strip()

                if not line or line.startswith('#'):
                    continue

                key, sep, value = line.partition(':')
                if not sep:
                    continue
                values[key.strip()] = value.strip()
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(str(e)) from e

    return values
