"""Tests for local history sources."""

import logging

import pytest

from activitytext.grouping import HistorySource
from activitytext.history import (
    ChainedHistory,
    FileHistory,
    History,
    HistoryError,
    StaticHistory,
    split_activities,
)


class TestSplitActivities:
    """Tests for split_activities."""

    def test_lines(self):
        """Test each line is one activity."""
        assert list(split_activities("one\ntwo\n")) == ["one", "two"]

    def test_skips_empty_lines(self):
        """Test blank lines are ignored."""
        assert list(split_activities("one\n\n\ntwo")) == ["one", "two"]

    def test_keeps_inner_whitespace(self):
        """Test activities are kept verbatim apart from line endings."""
        assert list(split_activities("  spaced  out \r\nx")) == ["  spaced  out ", "x"]

    def test_empty(self):
        """Test empty content yields nothing."""
        assert list(split_activities("")) == []


class TestStaticHistory:
    """Tests for StaticHistory."""

    def test_activities(self):
        """Test items are returned as given."""
        history = StaticHistory(["a", "b"])
        assert list(history.activities()) == ["a", "b"]

    def test_default_empty(self):
        """Test default history is empty."""
        assert list(StaticHistory().activities()) == []


class TestChainedHistory:
    """Tests for ChainedHistory."""

    def test_concatenates_in_order(self):
        """Test sources are read one after another."""
        history = ChainedHistory([StaticHistory(["a"]), StaticHistory(["b", "c"])])
        assert list(history.activities()) == ["a", "b", "c"]

    def test_empty(self):
        """Test no sources yields nothing."""
        assert list(ChainedHistory().activities()) == []


class TestFileHistory:
    """Tests for FileHistory."""

    def test_single_file(self, tmp_path):
        """Test reading one file relative to base_path."""
        (tmp_path / "activities.txt").write_text("meeting\ncode review\n", encoding="utf-8")

        history = FileHistory("activities.txt", base_path=tmp_path)

        assert list(history.activities()) == ["meeting", "code review"]

    def test_glob_pattern(self, tmp_path):
        """Test reading all files matching a wildcard, sorted by name."""
        logs = tmp_path / "logs"
        logs.mkdir()
        (logs / "b.txt").write_text("second\n", encoding="utf-8")
        (logs / "a.txt").write_text("first\n", encoding="utf-8")
        (logs / "ignored.csv").write_text("nope\n", encoding="utf-8")

        history = FileHistory("logs/*.txt", base_path=str(tmp_path))

        assert list(history.activities()) == ["first", "second"]

    def test_absolute_pattern(self, tmp_path):
        """Test an absolute pattern ignores base_path."""
        (tmp_path / "a.txt").write_text("absolute\n", encoding="utf-8")

        history = FileHistory(str(tmp_path / "*.txt"), base_path="/nonexistent")

        assert list(history.activities()) == ["absolute"]

    def test_directories_skipped(self, tmp_path):
        """Test directories matching the pattern are not read."""
        (tmp_path / "dir.txt").mkdir()
        (tmp_path / "file.txt").write_text("x\n", encoding="utf-8")

        history = FileHistory("*.txt", base_path=tmp_path)

        assert list(history.activities()) == ["x"]

    def test_unicode(self, tmp_path):
        """Test UTF-8 content is decoded."""
        (tmp_path / "a.txt").write_text("Übung 🎉\n", encoding="utf-8")
        history = FileHistory("a.txt", base_path=tmp_path)
        assert list(history.activities()) == ["Übung 🎉"]

    def test_default_base_path(self, tmp_path, monkeypatch):
        """Test base_path defaults to the current directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "a.txt").write_text("here\n", encoding="utf-8")

        history = FileHistory("a.txt")

        assert history.base_path.resolve() == tmp_path.resolve()
        assert list(history.activities()) == ["here"]

    def test_no_match_warns(self, tmp_path, caplog):
        """Test an empty result is reported."""
        history = FileHistory("missing/*.txt", base_path=tmp_path)

        with caplog.at_level(logging.WARNING, logger="activitytext.history.sources"):
            assert list(history.activities()) == []

        assert "missing/*.txt" in caplog.text

    def test_undecodable_file(self, tmp_path):
        """Test a decoding failure becomes HistoryError."""
        (tmp_path / "bad.txt").write_bytes(b"\xff\xfe\xfa broken")
        history = FileHistory("bad.txt", base_path=tmp_path)

        with pytest.raises(HistoryError):
            list(history.activities())


class TestHistoryBase:
    """Tests for the History base class."""

    @pytest.mark.parametrize("source", [
        StaticHistory(),
        ChainedHistory(),
        FileHistory("*.txt", base_path="/tmp"),
    ])
    def test_sources_satisfy_protocol(self, source):
        """Test shipped sources are History subclasses usable by the grouper."""
        assert isinstance(source, History)
        assert isinstance(source, HistorySource)

    def test_cannot_instantiate_base(self):
        """Test the base class is abstract."""
        with pytest.raises(TypeError):
            History()
