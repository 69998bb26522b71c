"""
Helper utilities for dirqd.

Common path functions used across the file queue domain.
"""

import os
from pathlib import Path
from typing import Optional, Union


def path_as_text(path: Union[str, os.PathLike]) -> Optional[str]:
    """
    Return ``path`` as a valid Unicode string.

    Names that were not decodable with the filesystem encoding carry lone
    surrogates after ``os.fsdecode``; those cannot be handed to a command or
    matched reliably.

    Args:
        path: Path to convert

    Returns:
        Text form of the path, or None if it is not representable
    """
    text = os.fsdecode(os.fspath(path))
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return text


def destination_for(name: str, directory: Path) -> Path:
    """Path a file named ``name`` ends up at when moved into ``directory``."""
    return directory / name
