"""Command implementations."""

# ============================================================
# Imports
# ============================================================

from pathlib import Path

from .config import Config
from .links import apply_link
from .models import LinkContext, LinkResult
from .output import (
    print_error,
    print_header,
    print_key_value,
    print_success,
    print_warning,
)
from .traversal import discover_manifests, process_manifest


# ============================================================
# Commands
# ============================================================

def execute_link_all(config: Config, context: LinkContext) -> list[LinkResult]:
    """
    Link everything declared for this machine.

    Process:
    1. Find every manifest named <user>@<host>.config under the config directory
    2. Process each manifest and its includes
    3. Link the repository itself to its home directory alias
    """
    print_header("Linking your dotfiles files...")
    print_key_value("Identity", str(config.identity))

    results: list[LinkResult] = []
    found = False
    for manifest_path in discover_manifests(config.config_dir, config.identity, config.verbose):
        found = True
        if config.verbose:
            print_success(f"Valid configuration file for {config.identity} found: {manifest_path}")
        results.extend(process_manifest(config, context, manifest_path))

    if not found:
        print_warning(f"No {config.identity.manifest_name} found under {config.config_dir}")

    # Link the repository itself
    results.append(apply_link(config, context, config.repo_root, config.self_link))
    return results


def execute_link_manifest(config: Config, context: LinkContext, path: Path) -> list[LinkResult]:
    """Link everything declared in a single manifest, skipping discovery."""
    print_header("Linking your dotfiles files...")

    if not path.is_file():
        print_error(f"Configuration file not found: {path}")
        raise SystemExit(1)

    return process_manifest(config, context, path)
