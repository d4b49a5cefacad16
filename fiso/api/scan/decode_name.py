"""Text form of a file name."""

import os


def decode_name(name: str) -> str:
    """Return ``name`` as valid text.

    Names holding bytes that are not valid UTF-8 (carried as surrogate
    escapes by ``os.scandir``) are decoded lossily, with U+FFFD in place of
    each bad byte.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return os.fsencode(name).decode("utf-8", errors="replace")
    return name
