from pathlib import Path
from typing import Iterable, List

from sample_metadata.errors import NoInputFiles

XML_EXTENSIONS = {".xml"}


def _normalize_extensions(extensions: Iterable[str]) -> set[str]:
    return {ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions}


def find_files(paths: Iterable[Path], extensions: Iterable[str] | None = None) -> List[Path]:
    """Return the sample documents named by ``paths``.

    Files are kept as given, whatever their suffix. Directories contribute
    their direct children with an allowed suffix, sorted by name.

    Args:
        paths: Files and/or directories
        extensions: Optional set of file extensions to pick from directories

    Raises:
        FileNotFoundError: A path does not exist
        NoInputFiles: Nothing was found
    """
    allowed = _normalize_extensions(extensions) if extensions is not None else XML_EXTENSIONS
    files: List[Path] = []
    for path in paths:
        path = Path(path)
        if path.is_file():
            files.append(path)
        elif path.is_dir():
            files.extend(
                child
                for child in sorted(path.iterdir())
                if child.is_file() and child.suffix.lower() in allowed
            )
        else:
            raise FileNotFoundError(path)

    if not files:
        raise NoInputFiles()
    return files
