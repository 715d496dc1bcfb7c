"""Domain models for dotfile linking."""

# ============================================================
# Imports
# ============================================================

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .paths import resolve_destination, resolve_source


# ============================================================
# Identity
# ============================================================

@dataclass(frozen=True)
class Identity:
    """The user and host a manifest is written for."""

    user: str
    host: str

    @property
    def manifest_name(self) -> str:
        """File name of the top-level manifest for this identity."""
        return f"{self.user}@{self.host}.config"

    def __str__(self) -> str:
        return f"{self.user}@{self.host}"


# ============================================================
# Manifest Models
# ============================================================

@dataclass(frozen=True)
class LinkDirective:
    """
    A link line from a manifest.

    Attributes:
        destination_raw: Where the link goes, may start with ~
        source_relative: File or directory to link, relative to the payload root
    """

    destination_raw: str
    source_relative: str

    def source_path(self, payload_root: Path) -> Path:
        """Resolve the source path under the payload root."""
        return resolve_source(self.source_relative, payload_root)

    def destination_path(self, home: Path) -> Path:
        """Resolve the destination path, expanding ~ to the home directory."""
        return resolve_destination(self.destination_raw, home)


@dataclass(frozen=True)
class IncludeDirective:
    """An include line from a manifest, already resolved against its directory."""

    target: Path


@dataclass(frozen=True)
class Manifest:
    """Directives parsed from one manifest file, in file order."""

    path: Path
    links: tuple[LinkDirective, ...] = ()
    includes: tuple[IncludeDirective, ...] = ()


# ============================================================
# Conflict Resolution
# ============================================================

class ConflictAction(Enum):
    """What to do with a link destination, keyed by its prompt letter."""

    ALREADY_LINKED = "a"
    SKIP = "s"
    SKIP_ALL = "S"
    OVERWRITE = "o"
    OVERWRITE_ALL = "O"
    BACKUP = "b"
    BACKUP_ALL = "B"
    LINK = "l"

    @property
    def is_global(self) -> bool:
        """True for the variants that apply to every later conflict."""
        return self in (ConflictAction.SKIP_ALL, ConflictAction.OVERWRITE_ALL, ConflictAction.BACKUP_ALL)

    @property
    def single_shot(self) -> 'ConflictAction':
        """The per-destination action an "all" variant stands for."""
        return {
            ConflictAction.SKIP_ALL: ConflictAction.SKIP,
            ConflictAction.OVERWRITE_ALL: ConflictAction.OVERWRITE,
            ConflictAction.BACKUP_ALL: ConflictAction.BACKUP,
        }.get(self, self)


PromptFunc = Callable[[str, str, Sequence[str]], str]


@dataclass
class LinkContext:
    """
    Run-scoped state shared by every link in a run.

    Attributes:
        prompt: Asks the user to choose one option, returns the chosen label
        global_action: First "all" answer of the run; never reset once set
    """

    prompt: PromptFunc
    global_action: ConflictAction | None = None


# ============================================================
# Link Results
# ============================================================

class LinkStatus(Enum):
    """Status of a link after execution."""

    ALREADY_LINKED = "Already linked"
    CREATED = "Created"
    CREATED_DRYRUN = "Created (Not executed)"
    BACKED_UP = "Backed up"
    BACKED_UP_DRYRUN = "Backed up (Not executed)"
    OVERWRITTEN = "Overwritten"
    OVERWRITTEN_DRYRUN = "Overwritten (Not executed)"
    SKIPPED = "Skipped"
    SKIPPED_SOURCE_NOT_FOUND = "Skipped (source not found)"
    FAILED = "Failed"


@dataclass(frozen=True)
class LinkResult:
    """
    Result of applying one link.

    Attributes:
        source: Absolute source path
        destination: Absolute destination path
        status: Status after execution
        action: Conflict action that was taken, None when the source was missing
    """

    source: Path
    destination: Path
    status: LinkStatus
    action: ConflictAction | None = None
