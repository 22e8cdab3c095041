"""Command line front-end for the activity grouper.

This module provides the main entry point for segmenting or expanding a
piece of activity text against recorded history.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union, TYPE_CHECKING

from activitytext.history import FileHistory
from activitytext.logging_config import setup_logging

from .converter import config_to_grouper
from .parser import GrouperConfig, parse_config_file

if TYPE_CHECKING:
    from activitytext.grouping import CommonPrefixGrouper

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = 'activitytext.yaml'


def load_grouper(
    config_path: Union[str, Path, None] = DEFAULT_CONFIG,
    base_path: Optional[Union[str, Path]] = None,
    extra_history: Sequence[str] = (),
) -> 'CommonPrefixGrouper':
    """Build a grouper from a YAML file and extra history patterns.

    Args:
        config_path: Path to the YAML file, or None to use no file
        base_path: Override base path from config (defaults to the
            directory of the YAML file)
        extra_history: Additional file patterns read after the configured
            history, relative to the current directory

    Returns:
        CommonPrefixGrouper, initialized

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigParseError: If the config file is invalid
        InitializationError: If the history cannot be read
    """
    if config_path is None:
        config = GrouperConfig()
        default_base = Path.cwd()
    else:
        config_path = Path(config_path)
        config = parse_config_file(config_path)
        default_base = config_path.parent
        logger.info("Loaded configuration from %s", config_path)

    if base_path is None:
        base_path = config.config.get('base_path', default_base)
        if not Path(base_path).is_absolute():
            base_path = default_base / Path(base_path)

    config.history.extend(str(Path(p).resolve()) for p in extra_history)

    grouper = config_to_grouper(config, base_path)
    grouper.initialize()
    return grouper


def format_groups(groups) -> List[str]:
    """Render groups one per line: kind, offset range and content."""
    return [
        f"{group.type.name:<9} [{group.start}, {group.end}) {group.content!r}"
        for group in groups
    ]


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Usage:
        python -m activitytext.config [options] TEXT

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    import argparse

    from activitytext.grouping import longest_common_expansion

    parser = argparse.ArgumentParser(
        description='Group or expand activity text using recorded history',
        prog='python -m activitytext.config',
    )
    parser.add_argument(
        'text',
        help='Activity text to segment (or to expand with --expand)',
    )
    parser.add_argument(
        '-c', '--config',
        default=None,
        help=f'Path to the YAML file (default: {DEFAULT_CONFIG} if present)',
    )
    parser.add_argument(
        '--history',
        action='append',
        default=[],
        metavar='PATTERN',
        help='Extra history file pattern; may be repeated',
    )
    parser.add_argument(
        '--base-path',
        type=str,
        default=None,
        help='Override base path for history file patterns',
    )
    parser.add_argument(
        '-e', '--expand',
        action='store_true',
        help='Print completion suggestions instead of groups',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print progress information',
    )

    parsed = parser.parse_args(args)
    setup_logging('INFO' if parsed.verbose else 'WARNING')

    config_path = parsed.config
    if config_path is None and Path(DEFAULT_CONFIG).exists():
        config_path = DEFAULT_CONFIG
    if config_path is None and not parsed.history:
        print(
            f"Error: no {DEFAULT_CONFIG} found; pass --config or --history",
            file=sys.stderr,
        )
        return 1

    try:
        grouper = load_grouper(
            config_path,
            base_path=parsed.base_path,
            extra_history=parsed.history,
        )

        if parsed.expand:
            expansions = grouper.expansions(parsed.text)
            for expansion in expansions:
                print(f"  {parsed.text}{expansion}")
            print(f"Insert: {longest_common_expansion(expansions)!r}")
        else:
            for line in format_groups(grouper.segments(parsed.text)):
                print(line)
        return 0

    except FileNotFoundError as e:
        # No traceback for a missing file, even with --verbose
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
