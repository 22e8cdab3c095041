"""History sources feeding recorded activities to the grouper.

Each source yields activity descriptions as plain strings. File based
sources hold one activity per line.

Pattern syntax:
- * - Wildcard (standard glob)

Example:
    history = FileHistory("activities/*.txt", base_path="/home/me/.stt")
    for activity in history.activities():
        print(activity)
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generator, Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)


class HistoryError(Exception):
    """Error reading recorded activities from a source."""
    pass


def split_activities(content: str) -> Generator[str, None, None]:
    """Yield the non-empty lines of ``content``, without line terminators."""
    for line in content.splitlines():
        if line:
            yield line


class History(ABC):
    """Base class for history sources.

    Subclasses implement ``activities``. Users can create custom
    subclasses for databases, APIs, etc.

    The grouper only requires the HistorySource protocol; this class is the
    shared base of the sources shipped here.
    """

    @abstractmethod
    def activities(self) -> Iterable[str]:
        """Yield every known activity description."""
        pass


@dataclass
class StaticHistory(History):
    """In-memory history.

    Example:
        StaticHistory(["meeting", "code review"])
    """
    items: Sequence[str] = field(default_factory=list)

    def activities(self) -> Iterable[str]:
        return iter(self.items)


@dataclass
class ChainedHistory(History):
    """Concatenation of several sources, read in order."""
    sources: List[History] = field(default_factory=list)

    def activities(self) -> Generator[str, None, None]:
        for source in self.sources:
            yield from source.activities()


@dataclass
class FileHistory(History):
    """Activities stored in local text files.

    Example:
        FileHistory("activities.txt")
        FileHistory("logs/*.txt", base_path="/data")
    """
    pattern: str
    base_path: Optional[Path] = None
    encoding: str = 'utf-8'

    def __post_init__(self):
        if self.base_path is None:
            self.base_path = Path.cwd()
        elif isinstance(self.base_path, str):
            self.base_path = Path(self.base_path)

    def list_resources(self) -> Generator[Path, None, None]:
        """Yield files matching the glob pattern, in sorted order."""
        pattern = Path(self.pattern)
        base = self.base_path
        if pattern.is_absolute():
            base = Path(pattern.anchor)
            pattern = pattern.relative_to(base)
        for path in sorted(base.glob(str(pattern))):
            if path.is_file():
                yield path

    def activities(self) -> Generator[str, None, None]:
        """Yield every non-empty line of every matching file.

        Raises:
            HistoryError: If a file cannot be read or decoded.
        """
        count = 0
        for path in self.list_resources():
            try:
                content = path.read_text(encoding=self.encoding)
            except (OSError, UnicodeDecodeError) as e:
                raise HistoryError(f"Cannot read history file {path}: {e}") from e
            logger.debug("Reading activities from %s", path)
            for activity in split_activities(content):
                count += 1
                yield activity
        if count == 0:
            logger.warning("No activities found for pattern '%s'", self.pattern)


@dataclass
class S3History(History):
    """Activities stored in S3 objects.

    Example:
        S3History("exports/*.log", bucket="my-bucket", profile="dev")
    """
    pattern: str = ""
    bucket: str = ""
    profile: Optional[str] = None
    region: Optional[str] = None
    encoding: str = 'utf-8'
    _client: Any = field(init=False, repr=False, default=None)

    def _get_client(self):
        """Lazy-load boto3 and create S3 client."""
        if self._client is None:
            try:
                import boto3
            except ImportError:
                raise ImportError(
                    "boto3 required for S3History. Install: pip install boto3"
                )
            session_kwargs = {}
            if self.profile:
                session_kwargs['profile_name'] = self.profile
            if self.region:
                session_kwargs['region_name'] = self.region
            self._client = boto3.Session(**session_kwargs).client('s3')
        return self._client

    def list_resources(self) -> Generator[str, None, None]:
        """Yield S3 keys matching the glob pattern."""
        # Get prefix up to first wildcard for efficient S3 listing
        prefix = self.pattern.split('*')[0]
        paginator = self._get_client().get_paginator('list_objects_v2')

        regex = re.compile(
            '^' + '.*'.join(re.escape(p) for p in self.pattern.split('*')) + '$'
        )

        for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
            for obj in page.get('Contents', []):
                key = obj['Key']
                if regex.match(key):
                    yield key

    def activities(self) -> Generator[str, None, None]:
        """Yield every non-empty line of every matching object.

        Raises:
            HistoryError: If listing or reading an object fails.
        """
        from botocore.exceptions import BotoCoreError, ClientError

        try:
            keys = sorted(self.list_resources())
            for key in keys:
                response = self._get_client().get_object(Bucket=self.bucket, Key=key)
                content = response['Body'].read().decode(self.encoding)
                logger.debug("Reading activities from s3://%s/%s", self.bucket, key)
                yield from split_activities(content)
        except (BotoCoreError, ClientError, UnicodeDecodeError) as e:
            raise HistoryError(
                f"Cannot read history from s3://{self.bucket}/{self.pattern}: {e}"
            ) from e
