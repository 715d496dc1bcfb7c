"""Manifest discovery and processing."""

# ============================================================
# Imports
# ============================================================

from collections.abc import Iterator
from pathlib import Path

from .config import Config
from .links import apply_link
from .manifest import parse_manifest
from .models import Identity, LinkContext, LinkResult
from .output import print_error, print_info


# ============================================================
# Discovery
# ============================================================

def discover_manifests(root: Path, identity: Identity, verbose: bool = False) -> Iterator[Path]:
    """
    Walk root depth-first and yield every manifest named for identity.

    Entries are visited in sorted order. Symlinked directories are followed,
    but a directory is never walked twice.

    Args:
        root: Directory to search
        identity: Selects the manifest file name
        verbose: Report every directory visited

    Yields:
        Paths of matching manifest files
    """
    if not root.is_dir():
        return
    yield from _walk(root, identity.manifest_name, verbose, set())


def _walk(directory: Path, manifest_name: str, verbose: bool, visited: set[Path]) -> Iterator[Path]:
    real_dir = directory.resolve()
    if real_dir in visited:
        return
    visited.add(real_dir)

    if verbose:
        print_info(f"Parsing directory {directory}")

    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        print_error(f"Could not read directory {directory}: {e.strerror or e}")
        return

    for entry in entries:
        # Broken symlinks
        if not entry.exists():
            continue

        if entry.is_file():
            if entry.name == manifest_name:
                yield entry
        elif entry.is_dir():
            yield from _walk(entry, manifest_name, verbose, visited)


# ============================================================
# Processing
# ============================================================

def process_manifest(
    config: Config,
    context: LinkContext,
    path: Path,
    chain: tuple[Path, ...] = (),
) -> list[LinkResult]:
    """
    Apply every link of a manifest, then process its includes.

    Args:
        config: Configuration object
        context: Run state for conflict resolution
        path: Manifest to process
        chain: Manifests currently being processed above this one

    Returns:
        Results of all links, in the order they were applied
    """
    print_info(f"Parsing configuration file {path}")
    manifest = parse_manifest(path, config.verbose)
    chain = chain + (path.resolve(),)

    # Links first
    if config.verbose:
        print_info("Create links...")
    results = [
        apply_link(
            config,
            context,
            link.source_path(config.dotfiles_dir),
            link.destination_path(config.home),
        )
        for link in manifest.links
    ]

    # Then includes, depth-first
    if config.verbose:
        print_info("Parse included configuration files")
    for include in manifest.includes:
        if include.target.resolve() in chain:
            print_error(f"Skipping recursive include of {include.target} in {path}")
            continue
        print()
        results.extend(process_manifest(config, context, include.target, chain))

    return results
