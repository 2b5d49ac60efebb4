"""Checks that are performed to configuration options."""

import os
from pathlib import Path


class InvalidConfigurationError(Exception):
    """Service configuration is invalid."""


def file_check(path: Path, desc: str) -> None:
    """Check that path is a readable regular file.

    Parameters:
        path (Path): Filesystem path to validate.
        desc (str): Short description of the file, used in error messages.

    Raises:
        InvalidConfigurationError: If the path does not point to a file or
        the file is not readable.
    """
    if not os.path.isfile(path):
        raise InvalidConfigurationError(f"{desc} '{path}' is not a file")
    if not os.access(path, os.R_OK):
        raise InvalidConfigurationError(f"{desc} '{path}' is not readable")
