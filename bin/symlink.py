#!/usr/bin/env python3
"""Dotfiles linking tool.

Links every file declared in config/<user>@<host>.config (and the manifests
it includes) from dotfiles/ into place.
"""

import argparse
import sys
from pathlib import Path

from symlinklib import (
    Config,
    LinkContext,
    execute_link_all,
    execute_link_manifest,
)
from symlinklib.output import print_error, print_info, prompt_user


# --------------------------------------------------------------------------- #
# Main
# --------------------------------------------------------------------------- #

def main(argv=None):
    """Parse arguments and link the requested manifests.

    Without a manifest argument every manifest for this user and host is
    linked, followed by the repository itself. With one argument only that
    manifest (and its includes) is linked.
    """
    parser = argparse.ArgumentParser(description="Dotfiles linking tool")
    parser.add_argument("manifest", nargs="?", type=Path,
                        help="link a single manifest instead of searching config/")
    parser.add_argument("--root", type=Path,
                        help="dotfiles repository (default: the checkout this tool lives in)")
    parser.add_argument("--dry-run", action="store_true",
                        help="print actions without executing them")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="report every directory, directive and link attempt")
    args = parser.parse_args(argv)

    # Dispatch command
    try:
        config = Config(repo_root=args.root)
        config.dryrun = args.dry_run
        config.verbose = args.verbose
        context = LinkContext(prompt=prompt_user)

        if args.manifest is None:
            execute_link_all(config, context)
        else:
            execute_link_manifest(config, context, args.manifest)
    except KeyboardInterrupt:
        print_info("\nInterrupted")
        sys.exit(130)
    except Exception as e:
        print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
