"""Configuration management."""

# ============================================================
# Imports
# ============================================================

import getpass
import socket
import subprocess
import tomllib
from pathlib import Path
from typing import Any

from .models import Identity


# ============================================================
# Defaults
# ============================================================

SETTINGS_FILE = "symlink.toml"

DEFAULT_CONFIG_DIR = "config"
DEFAULT_DOTFILES_DIR = "dotfiles"
DEFAULT_SELF_LINK = "~/.dotfiles"

# Checkout this tool runs from: <root>/bin/symlinklib/config.py
PACKAGE_DIR = Path(__file__).resolve().parent
TOOL_ROOT = PACKAGE_DIR.parent.parent


# ============================================================
# Configuration
# ============================================================

class Config:
    """Configuration paths and global state."""

    def __init__(self, repo_root: Path | None = None, home: Path | None = None):
        # Resolve repository root, following a symlinked checkout
        self.repo_root = (repo_root or find_repo_root()).resolve()
        self.home = home or Path.home()

        # Optional overrides from symlink.toml
        settings = load_settings(self.repo_root / SETTINGS_FILE)

        # Tree layout
        self.config_dir = self.repo_root / settings.get('config_dir', DEFAULT_CONFIG_DIR)
        self.dotfiles_dir = self.repo_root / settings.get('dotfiles_dir', DEFAULT_DOTFILES_DIR)
        self.self_link = settings.get('self_link', DEFAULT_SELF_LINK)

        # Machine identity
        self.identity = Identity(
            user=settings.get('user') or getpass.getuser(),
            host=settings.get('host') or socket.gethostname(),
        )

        # Runtime flags
        self.dryrun = False
        self.verbose = False


# ============================================================
# Repository Root
# ============================================================

def find_repo_root() -> Path:
    """
    Locate the dotfiles repository this tool lives in.

    Uses the git toplevel of the package directory, or the checkout root
    above bin/ outside of git. The working directory plays no part.
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True, text=True, check=True,
            cwd=PACKAGE_DIR,
        )
        return Path(result.stdout.strip())
    except (subprocess.CalledProcessError, FileNotFoundError):
        return TOOL_ROOT


# ============================================================
# TOML Loading
# ============================================================

def load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file."""
    with open(path, 'rb') as f:
        return tomllib.load(f)


def load_settings(path: Path) -> dict[str, Any]:
    """
    Load repository settings.

    Returns an empty dict when the file does not exist.
    """
    if not path.is_file():
        return {}
    return load_toml(path)
