"""Link creation and conflict handling."""

# ============================================================
# Imports
# ============================================================

import os
import shutil
from pathlib import Path

from .config import Config
from .conflicts import resolve_conflict
from .models import ConflictAction, LinkContext, LinkResult, LinkStatus
from .output import print_error, print_info, print_success, print_warning
from .paths import ensure_parent_dir, resolve_destination


# ============================================================
# Configuration
# ============================================================

BACKUP_SUFFIX = ".backup"


# ============================================================
# Entry Point
# ============================================================

def apply_link(config: Config, context: LinkContext, source: Path, destination: Path | str) -> LinkResult:
    """
    Link destination to source, resolving any conflict on the way.

    Problems with a single link are reported and returned as a status, they
    never stop the run. Only an invalid prompt answer propagates.

    Args:
        config: Configuration object
        context: Run state for conflict resolution
        source: Absolute path of the original file or directory
        destination: Where the link goes, may start with ~

    Returns:
        Result with status after execution
    """
    destination = resolve_destination(str(destination), config.home)
    if config.verbose:
        print_info(f"Trying to link {destination} -> {source}")

    # Validate source exists
    if not source.exists():
        print_error(f"Failed linking {destination} because {source} does not exist")
        return LinkResult(source, destination, LinkStatus.SKIPPED_SOURCE_NOT_FOUND)

    try:
        ensure_parent_dir(destination, config.dryrun)
        action = resolve_conflict(context, source, destination)
        status = execute_action(config, action, source, destination)
    except OSError as e:
        print_error(f"Failed linking {destination} -> {source}: {e.strerror or e}")
        return LinkResult(source, destination, LinkStatus.FAILED)

    return LinkResult(source, destination, status, action)


# ============================================================
# Actions
# ============================================================

def execute_action(config: Config, action: ConflictAction, source: Path, destination: Path) -> LinkStatus:
    """Clear the destination as the action requires, then create the link."""
    if action == ConflictAction.ALREADY_LINKED:
        print_success(f"Already linked {destination}")
        return LinkStatus.ALREADY_LINKED

    if action == ConflictAction.SKIP:
        print_info(f"Skipped {source}")
        return LinkStatus.SKIPPED

    if action == ConflictAction.BACKUP:
        backup_destination(config, destination)
        status = LinkStatus.BACKED_UP_DRYRUN if config.dryrun else LinkStatus.BACKED_UP
    elif action == ConflictAction.OVERWRITE:
        remove_destination(config, destination)
        status = LinkStatus.OVERWRITTEN_DRYRUN if config.dryrun else LinkStatus.OVERWRITTEN
    elif action == ConflictAction.LINK:
        status = LinkStatus.CREATED_DRYRUN if config.dryrun else LinkStatus.CREATED
    else:
        raise ValueError(f"Unexpected conflict action {action}")

    create_symlink(config, source, destination)
    return status


def backup_destination(config: Config, destination: Path) -> None:
    """Move an existing destination out of the way."""
    backup = destination.with_name(destination.name + BACKUP_SUFFIX)
    if not config.dryrun:
        os.replace(destination, backup)
    print_info(f"Moved {destination} to {backup}")


def remove_destination(config: Config, destination: Path) -> None:
    """Delete an existing destination, recursively for real directories."""
    if not config.dryrun:
        if destination.is_dir() and not destination.is_symlink():
            shutil.rmtree(destination)
        else:
            destination.unlink()
    print_warning(f"Removed original {destination}")


def create_symlink(config: Config, source: Path, destination: Path) -> None:
    """Create the symlink at destination pointing to source."""
    if not config.dryrun:
        destination.symlink_to(source)
    print_success(f"{destination} -> {source}")
