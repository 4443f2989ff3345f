"""File system helpers used around the rewriting engine."""

from pathlib import Path

from line_rewriter.models import DEFAULT_ENCODING


def is_valid_file(file_path: str) -> bool:
    """True if ``file_path`` is an existing regular file."""
    return Path(file_path).is_file()


def read_text(file_path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a file without newline translation so ``\\r`` survives."""
    with open(file_path, "r", encoding=encoding, newline="") as f:
        return f.read()


def write_text(file_path: str, content: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Overwrite a file in one write, without newline translation."""
    with open(file_path, "w", encoding=encoding, newline="") as f:
        f.write(content)


def list_files(dir_path: str, exclude_patterns: list[str] | None = None) -> list[str]:
    """Recursively list files below ``dir_path``, depth first, sorted by name.

    Args:
        dir_path: Directory to walk.
        exclude_patterns: Path components to skip (e.g. ``[".git"]``).

    Returns:
        File paths joined onto ``dir_path`` as given, not resolved.

    Raises:
        FileNotFoundError: If ``dir_path`` does not exist.
        NotADirectoryError: If ``dir_path`` is a file.
    """
    excluded = set(exclude_patterns or [])
    file_paths: list[str] = []

    for path in sorted(Path(dir_path).iterdir(), key=lambda p: p.name):
        if path.name in excluded:
            continue
        # Symlinked directories could loop back into the tree
        if path.is_dir() and not path.is_symlink():
            file_paths.extend(list_files(str(path), exclude_patterns))
        elif path.is_file():
            file_paths.append(str(path))

    return file_paths
