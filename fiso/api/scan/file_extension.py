"""Histogram key for a file name."""

from ...constants import NO_EXTENSION


def file_extension(name: str) -> str:
    """Return the ``.``-prefixed extension of ``name``, or ``"Other"``.

    The extension is whatever follows the last dot, with case preserved.
    Dotfiles such as ``.bashrc`` have no extension; ``notes.`` has the empty
    extension ``"."``. Extensions that are not valid text count as ``"Other"``.

    >>> file_extension("report.PDF")
    '.PDF'
    >>> file_extension("archive.tar.gz")
    '.gz'
    >>> file_extension("Makefile")
    'Other'
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return NO_EXTENSION
    try:
        ext.encode("utf-8")
    except UnicodeEncodeError:
        return NO_EXTENSION
    return f".{ext}"
