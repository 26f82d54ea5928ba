"""Command line interface for DirTreeLib.

Usage:
    dirtree                      # List the current directory
    dirtree src -d 2             # Two levels below src's own listing
    dirtree src --all --color    # Whole tree, colored
    dirtree --map dirs.json      # One tree per entry of a JSON depth map
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .builder import build_tree_sync, build_trees_sync
from .config import BuildConfig
from .errors import DirTreeError
from .render import render

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="Print a depth-limited directory tree.",
    )
    parser.add_argument("path", nargs="?", default=None,
                        help="Directory to list (default: current directory)")

    depth_group = parser.add_mutually_exclusive_group()
    depth_group.add_argument("-d", "--depth", type=int, default=None,
                             help="Levels to descend below the first listing (default: 0)")
    depth_group.add_argument("-a", "--all", action="store_true",
                             help="Descend without a depth limit")

    parser.add_argument("--map", metavar="FILE", dest="map_file",
                        help="JSON depth map; builds one tree per entry instead of PATH")
    parser.add_argument("--color", action="store_true",
                        help="Colorize output with ANSI escape codes")
    parser.add_argument("--max-concurrent", type=int, default=100,
                        help="Maximum concurrent filesystem calls (default: 100)")
    parser.add_argument("--no-follow-symlinks", action="store_true",
                        help="Report symbolic links as files instead of following them")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)
    if args.map_file and (args.path is not None or args.depth is not None or args.all):
        parser.error("--map cannot be combined with PATH, --depth or --all")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``dirtree`` console script.

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    depth = True if args.all else (args.depth or 0)

    try:
        config = BuildConfig(
            max_concurrent=args.max_concurrent,
            follow_symlinks=not args.no_follow_symlinks,
        )
        if args.map_file:
            with open(args.map_file, encoding="utf-8") as f:
                depth_map = json.load(f)
            if not isinstance(depth_map, dict):
                raise DirTreeError(f"{args.map_file}: depth map must be a JSON object")
            trees = build_trees_sync(depth_map, config=config)
        else:
            trees = [build_tree_sync(args.path or ".", depth, config=config)]
    except (DirTreeError, OSError, ValueError) as e:
        # Includes JSONDecodeError and UnicodeDecodeError
        logger.debug("Build failed", exc_info=True)
        print(f"dirtree: {e}", file=sys.stderr)
        return 1

    for index, tree in enumerate(trees):
        if index:
            print()
        print(render(tree, use_colors=args.color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
