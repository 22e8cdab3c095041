"""Tests for S3History with moto mocking.

If moto/boto3 are not installed, the tests are automatically skipped.
"""

import pytest

# Skip all tests if boto3/moto not available
boto3 = pytest.importorskip("boto3")
moto = pytest.importorskip("moto")

from moto import mock_aws

from activitytext.grouping import CommonPrefixGrouper
from activitytext.history import HistoryError, S3History


@pytest.fixture
def s3_bucket():
    """Create a mocked S3 bucket for testing."""
    with mock_aws():
        client = boto3.client('s3', region_name='us-east-1')
        client.create_bucket(Bucket='test-bucket')
        yield client


class TestS3HistoryListResources:
    """Tests for S3History.list_resources()."""

    def test_list_matching_keys(self, s3_bucket):
        """Test only keys matching the pattern are listed."""
        s3_bucket.put_object(Bucket='test-bucket', Key='exports/a.log', Body=b'x')
        s3_bucket.put_object(Bucket='test-bucket', Key='exports/b.log', Body=b'y')
        s3_bucket.put_object(Bucket='test-bucket', Key='exports/c.csv', Body=b'z')
        s3_bucket.put_object(Bucket='test-bucket', Key='other/d.log', Body=b'w')

        history = S3History("exports/*.log", bucket="test-bucket", region="us-east-1")

        assert sorted(history.list_resources()) == ['exports/a.log', 'exports/b.log']

    def test_exact_key(self, s3_bucket):
        """Test a pattern without wildcard names one object."""
        s3_bucket.put_object(Bucket='test-bucket', Key='activities.txt', Body=b'x')
        s3_bucket.put_object(Bucket='test-bucket', Key='activities.txt.bak', Body=b'y')

        history = S3History("activities.txt", bucket="test-bucket", region="us-east-1")

        assert list(history.list_resources()) == ['activities.txt']


class TestS3HistoryActivities:
    """Tests for reading activities from S3."""

    def test_read_lines(self, s3_bucket):
        """Test every non-empty line of every object is an activity."""
        s3_bucket.put_object(
            Bucket='test-bucket', Key='exports/2024.log',
            Body='meeting\n\ncode review\n'.encode('utf-8'),
        )
        s3_bucket.put_object(
            Bucket='test-bucket', Key='exports/2025.log',
            Body='Übung\n'.encode('utf-8'),
        )

        history = S3History("exports/*.log", bucket="test-bucket", region="us-east-1")

        assert list(history.activities()) == ["meeting", "code review", "Übung"]

    def test_missing_bucket(self, s3_bucket):
        """Test S3 errors become HistoryError."""
        history = S3History("*.log", bucket="no-such-bucket", region="us-east-1")

        with pytest.raises(HistoryError):
            list(history.activities())

    def test_feeds_grouper(self, s3_bucket):
        """Test a grouper can be loaded from S3."""
        s3_bucket.put_object(
            Bucket='test-bucket', Key='activities.txt',
            Body=b'group subgroup one\ngroup subgroup two\n',
        )
        grouper = CommonPrefixGrouper(
            S3History("activities.txt", bucket="test-bucket", region="us-east-1")
        )

        assert grouper.expansions("gr") == ["oup subgroup "]
