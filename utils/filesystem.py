import os
import unicodedata
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]

def library_path(base_path: PathLike, relative_path: PathLike) -> str:
    """Absolute location of a scan-root-relative path."""
    return os.path.join(os.fspath(base_path), os.fspath(relative_path))

def resolve_path(path: PathLike) -> Optional[str]:
    """
    Return an existing spelling of `path`, or None.

    Libraries copied between macOS (NFD) and Linux (NFC) can hold file names
    in either normalization form, so both are tried.
    """
    path = os.fspath(path)
    if os.path.exists(path):
        return path

    for form in ('NFC', 'NFD'):
        candidate = unicodedata.normalize(form, path)
        if os.path.exists(candidate):
            return candidate

    return None
