"""Sources of previously recorded activity descriptions.

Example:
    from activitytext.history import FileHistory, ChainedHistory

    history = ChainedHistory([
        FileHistory("activities/*.txt"),
        S3History("exports/*.log", bucket="my-bucket"),
    ])
"""

from .sources import (
    History,
    HistoryError,
    StaticHistory,
    ChainedHistory,
    FileHistory,
    S3History,
    split_activities,
)

__all__ = [
    'History',
    'HistoryError',
    'StaticHistory',
    'ChainedHistory',
    'FileHistory',
    'S3History',
    'split_activities',
]
