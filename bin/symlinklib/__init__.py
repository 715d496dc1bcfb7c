"""Dotfiles linking library."""

from .commands import execute_link_all, execute_link_manifest
from .config import Config
from .conflicts import resolve_conflict
from .errors import InvalidChoiceError, SymlinkerError
from .links import apply_link
from .manifest import parse_manifest, tokenize_line
from .models import (
    ConflictAction,
    Identity,
    IncludeDirective,
    LinkContext,
    LinkDirective,
    LinkResult,
    LinkStatus,
    Manifest,
)
from .traversal import discover_manifests, process_manifest

__all__ = [
    # Configuration
    'Config',
    # Domain models
    'ConflictAction',
    'Identity',
    'IncludeDirective',
    'LinkContext',
    'LinkDirective',
    'LinkResult',
    'LinkStatus',
    'Manifest',
    # Errors
    'InvalidChoiceError',
    'SymlinkerError',
    # Operations
    'apply_link',
    'discover_manifests',
    'parse_manifest',
    'process_manifest',
    'resolve_conflict',
    'tokenize_line',
    # Commands
    'execute_link_all',
    'execute_link_manifest',
]
