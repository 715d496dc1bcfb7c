"""Manifest parsing.

A manifest holds one directive per line:

    ~/.bashrc           bash/bashrc     # link ~/.bashrc to dotfiles/bash/bashrc
    ~/My\\ Documents/x   misc/x          # escaped spaces stay inside a path
    include shared/home.config          # relative to this manifest's directory

Everything from an unescaped '#' to the end of the line is a comment.
"""

# ============================================================
# Imports
# ============================================================

from pathlib import Path

from .models import IncludeDirective, LinkDirective, Manifest
from .output import print_error, print_info, print_warning


# ============================================================
# Configuration
# ============================================================

INCLUDE_KEYWORD = 'include'

COMMENT_CHAR = '#'
ESCAPE_CHAR = '\\'

# Characters that lose their special meaning after a backslash.
# Escaped whitespace always stands for a single space.
ESCAPED_WHITESPACE = (' ', '\t')
ESCAPABLE_CHARS = ESCAPED_WHITESPACE + (COMMENT_CHAR,)


# ============================================================
# Tokenizer
# ============================================================

def tokenize_line(line: str) -> list[str]:
    """
    Split a manifest line into whitespace-separated tokens.

    Escaped whitespace becomes a space inside the token and an escaped '#'
    a literal '#'. Any other backslash is an ordinary character.

    Args:
        line: Raw manifest line

    Returns:
        Tokens in order, empty for blank and comment-only lines
    """
    tokens: list[str] = []
    current: list[str] = []
    index = 0

    while index < len(line):
        char = line[index]

        if char == ESCAPE_CHAR and index + 1 < len(line) and line[index + 1] in ESCAPABLE_CHARS:
            escaped = line[index + 1]
            current.append(' ' if escaped in ESCAPED_WHITESPACE else escaped)
            index += 2
            continue

        if char == COMMENT_CHAR:
            break

        if char.isspace():
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)
        index += 1

    if current:
        tokens.append(''.join(current))

    return tokens


# ============================================================
# Parsing
# ============================================================

def parse_manifest(path: Path, verbose: bool = False) -> Manifest:
    """
    Parse a manifest into link and include directives.

    Malformed lines and missing include targets are reported and dropped,
    the rest of the file is still parsed. Bytes that are not UTF-8 are
    replaced, and an unreadable file is reported and yields no directives.

    Args:
        path: Manifest file to read
        verbose: Report every directive found

    Returns:
        Manifest with links and includes in file order
    """
    links: list[LinkDirective] = []
    includes: list[IncludeDirective] = []

    try:
        text = path.read_text(encoding='utf-8', errors='replace')
    except OSError as e:
        print_error(f"Could not read configuration file {path}: {e.strerror or e}")
        return Manifest(path=path)

    for line in text.splitlines():
        tokens = tokenize_line(line)
        if not tokens:
            continue

        if len(tokens) == 2 and tokens[0] == INCLUDE_KEYWORD:
            # Always below the including manifest's directory
            target = path.parent / tokens[1].lstrip('/')
            if target.is_file():
                if verbose:
                    print_info(f"Found include statement {line.strip()}")
                includes.append(IncludeDirective(target=target))
            else:
                print_error(f"Could not include file: {target}")

        elif len(tokens) == 2:
            if verbose:
                print_info(f"Found link statement {line.strip()}")
            links.append(LinkDirective(destination_raw=tokens[0], source_relative=tokens[1]))

        else:
            print_warning(f"Can not parse line in {path}: {line.strip()}")

    return Manifest(path=path, links=tuple(links), includes=tuple(includes))
