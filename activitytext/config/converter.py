"""Convert parsed configuration into history sources and a grouper."""

from pathlib import Path
from typing import Any, List, Union, TYPE_CHECKING

from activitytext.history import ChainedHistory, FileHistory, History, S3History

from .parser import GrouperConfig

if TYPE_CHECKING:
    from activitytext.grouping import CommonPrefixGrouper


def config_to_sources(
    config: GrouperConfig,
    base_path: Union[str, Path, None] = None,
) -> List[History]:
    """Convert all history entries of a GrouperConfig.

    Args:
        config: Parsed configuration
        base_path: Override base path (defaults to config.base_path or cwd)

    Returns:
        List of History objects, in configuration order
    """
    if base_path is None:
        base_path = config.config.get('base_path', '.')
    base_path = Path(base_path).resolve()

    return [_parse_history_spec(spec, base_path) for spec in config.history]


def config_to_grouper(
    config: GrouperConfig,
    base_path: Union[str, Path, None] = None,
) -> 'CommonPrefixGrouper':
    """Build a (not yet initialized) grouper from a GrouperConfig."""
    from activitytext.grouping import CommonPrefixGrouper, MINIMUM_GROUP_LENGTH

    return CommonPrefixGrouper(
        ChainedHistory(config_to_sources(config, base_path)),
        baseline=list(config.baseline),
        min_group_length=config.config.get('min_group_length', MINIMUM_GROUP_LENGTH),
    )


def _parse_history_spec(spec: Any, base_path: Path) -> History:
    """Parse a history specification into a History object.

    Args:
        spec: History specification (string or dict)
        base_path: Base path for file patterns

    Returns:
        History subclass instance
    """
    # Short form: just a pattern string
    if isinstance(spec, str):
        return FileHistory(spec, base_path=base_path)

    pattern = spec['pattern']
    history_type = spec.get('type', 'file')

    if history_type == 'file':
        return FileHistory(
            pattern,
            base_path=base_path,
            encoding=spec.get('encoding', 'utf-8'),
        )

    elif history_type == 's3':
        return S3History(
            pattern,
            bucket=spec['bucket'],
            profile=spec.get('profile'),
            region=spec.get('region'),
            encoding=spec.get('encoding', 'utf-8'),
        )

    else:
        raise ValueError(f"Unknown history type: {history_type}")
