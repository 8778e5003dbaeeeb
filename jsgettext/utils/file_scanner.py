"""File scanner — discover JavaScript and TypeScript sources to extract from."""

from pathlib import Path

# Directories to always skip
SKIP_DIRS = {
    ".git", "__pycache__", "node_modules", ".venv", "venv",
    "dist", "build", ".next", ".nuxt", "coverage", "bower_components",
}

# File extensions we extract from, mapped to grammar
LANGUAGE_MAP = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


def scan_source_files(root: Path) -> list[Path]:
    """Recursively scan a directory for source files, in sorted order.

    Skips dependency and build output directories.
    """
    files = []
    for item in sorted(root.rglob("*")):
        if item.is_file() and _should_include(item.relative_to(root)):
            files.append(item)
    return files


def expand_paths(paths: list[Path]) -> list[Path]:
    """Expand directories into their source files; files are kept as given."""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(scan_source_files(path))
        else:
            files.append(path)
    return files


def _should_include(path: Path) -> bool:
    """Check if a file should be included in extraction."""
    for part in path.parts:
        if part in SKIP_DIRS:
            return False

    return path.suffix.lower() in LANGUAGE_MAP


def classify_file(path: Path) -> str | None:
    """Return the grammar for a file, or None if the suffix is unknown."""
    return LANGUAGE_MAP.get(path.suffix.lower())
