"""Conflict resolution for existing link destinations."""

# ============================================================
# Imports
# ============================================================

import os
from pathlib import Path

from .errors import InvalidChoiceError
from .models import ConflictAction, LinkContext
from .output import print_error


# ============================================================
# Configuration
# ============================================================

PROMPT_MESSAGE = "[s]kip, [S]kip all, [o]verwrite, [O]verwrite all, [b]ackup, [B]ackup all?"

PROMPT_CHOICES = {
    action.value: action
    for action in (
        ConflictAction.SKIP,
        ConflictAction.SKIP_ALL,
        ConflictAction.OVERWRITE,
        ConflictAction.OVERWRITE_ALL,
        ConflictAction.BACKUP,
        ConflictAction.BACKUP_ALL,
    )
}


# ============================================================
# Resolution
# ============================================================

def resolve_conflict(context: LinkContext, source: Path, destination: Path) -> ConflictAction:
    """
    Decide what to do with the destination of a link.

    The user is only asked when the destination holds something else and no
    "all" answer has been given yet in this run. An "all" answer is stored on
    the context and returned as its single-shot action.

    Args:
        context: Run state holding the prompt and the global action
        source: Absolute source path
        destination: Absolute destination path

    Returns:
        Action to execute for this destination

    Raises:
        InvalidChoiceError: If the prompt answer is not one of the offered options
    """
    # Nothing in the way
    if not os.path.lexists(destination):
        return ConflictAction.LINK

    # Linked by an earlier run
    if destination.is_symlink() and os.readlink(destination) == str(source):
        return ConflictAction.ALREADY_LINKED

    if destination == source:
        print_error(f"Trying to link to itself {destination} -> {source}")
        return ConflictAction.SKIP

    if context.global_action is not None:
        return context.global_action.single_shot

    answer = context.prompt(
        f"File already exists: {destination} ({source.name})",
        PROMPT_MESSAGE,
        list(PROMPT_CHOICES),
    )
    action = PROMPT_CHOICES.get(answer)
    if action is None:
        raise InvalidChoiceError(answer)

    if action.is_global:
        context.global_action = action
    return action.single_shot
