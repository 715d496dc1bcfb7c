"""Path resolution for link sources and destinations."""

# ============================================================
# Imports
# ============================================================

from pathlib import Path

from .output import print_info


# ============================================================
# Resolution
# ============================================================

def expand_home(raw: str, home: Path) -> str:
    """Replace a leading ~ with the home directory."""
    if raw.startswith('~'):
        return f"{home}{raw[1:]}"
    return raw


def resolve_destination(raw: str, home: Path) -> Path:
    """Resolve a destination as written in a manifest."""
    return Path(expand_home(raw, home))


def resolve_source(relative: str, payload_root: Path) -> Path:
    """
    Resolve a source path under the payload root.

    A leading slash does not escape the payload root, the path is always
    appended to it.
    """
    return payload_root / relative.lstrip('/')


# ============================================================
# Directories
# ============================================================

def ensure_parent_dir(path: Path, dryrun: bool = False) -> bool:
    """
    Create the parent directory of path, including intermediate ancestors.

    Args:
        path: Path whose parent must exist
        dryrun: Report the directory without creating it

    Returns:
        True if the parent was missing
    """
    parent = path.parent
    if parent.is_dir():
        return False

    print_info(f"Creating new directory to link dotfiles into: {parent}")
    if not dryrun:
        parent.mkdir(parents=True, exist_ok=True)
    return True
