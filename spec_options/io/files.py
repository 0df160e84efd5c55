"""Options file I/O for spec-options.

Provides functions for loading, saving, and resolving ``options.yml`` files.
Which files make up a test's hierarchy is decided by the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ..options import SpecOptions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

OPTIONS_FILENAME = "options.yml"

YAML_SUFFIXES = (".yml", ".yaml")


def options_path(path: PathLike) -> Path:
    """Return the options file for path.

    Existing files and paths with a YAML suffix are used as-is. Anything else
    is taken as a directory, existing or not, holding ``options.yml``.
    """
    path = Path(path)
    if path.is_dir():
        return path / OPTIONS_FILENAME
    if path.is_file() or path.suffix in YAML_SUFFIXES:
        return path
    return path / OPTIONS_FILENAME


def load_options(path: PathLike) -> SpecOptions:
    """Load options from a file or a directory's options file.

    Parameters
    ----------
    path : PathLike
        Options file, or directory containing ``options.yml``.

    Returns
    -------
    SpecOptions
        Loaded options. Empty options if the file does not exist.
    """
    file_path = options_path(path)
    if not file_path.exists():
        return SpecOptions.empty()
    return SpecOptions.from_yaml(file_path.read_text(encoding="utf-8"))


def save_options(path: PathLike, options: SpecOptions) -> Optional[Path]:
    """Write options to path, removing the file if the options are empty.

    Parameters
    ----------
    path : PathLike
        Options file, or directory containing ``options.yml``.
    options : SpecOptions
        Options to write.

    Returns
    -------
    Path or None
        The written path, or None when nothing was written.
    """
    file_path = options_path(path)
    if options.is_empty:
        if file_path.exists():
            file_path.unlink()
            logger.info("Removed empty options file: %s", file_path)
        return None

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(options.to_yaml(), encoding="utf-8")
    logger.debug("Wrote options file: %s", file_path)
    return file_path


def resolve_options(paths: Iterable[PathLike]) -> SpecOptions:
    """Merge the options of paths ordered from root to leaf.

    Parameters
    ----------
    paths : Iterable[PathLike]
        Options files or directories, outermost first.

    Returns
    -------
    SpecOptions
        Effective options of the innermost path.
    """
    resolved = SpecOptions.empty()
    for path in paths:
        resolved = resolved.merge(load_options(path))
    return resolved
