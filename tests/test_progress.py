"""Tests for clone progress translation"""
from git_porcelain.models import CloneProgressEvent, CloneProgressKind
from git_porcelain.parsers import parse_clone_progress, parse_percent


class TestParsePercent:
    def test_reads_leading_percentage(self):
        assert parse_percent(" 42% (420/1000)") == 42
        assert parse_percent("100% (1000/1000), done.") == 100

    def test_malformed_is_zero(self):
        assert parse_percent("lots") == 0
        assert parse_percent("") == 0

    def test_clamped(self):
        assert parse_percent("250%") == 100


class TestParseCloneProgress:
    """Test mapping of clone output fragments to events."""

    def test_fragment_sequence(self):
        """Test the cloning-into, receiving(42), receiving(100) sequence."""
        fragments = [
            "Cloning into 'x'...",
            "Receiving objects:  42% (420/1000)",
            "Receiving objects: 100% (1000/1000), done.",
        ]
        events = [parse_clone_progress(f) for f in fragments]

        assert [(e.kind, e.percent) for e in events] == [
            (CloneProgressKind.CLONING_INTO, 0),
            (CloneProgressKind.RECEIVING, 42),
            (CloneProgressKind.RECEIVING, 100),
        ]

    def test_each_phase(self):
        assert parse_clone_progress("remote: Counting objects:  10% (1/10)").kind == CloneProgressKind.COUNTING
        assert parse_clone_progress("remote: Compressing objects:  50% (5/10)").percent == 50
        assert parse_clone_progress("Resolving deltas:  75% (3/4)").kind == CloneProgressKind.RESOLVING_DELTAS

    def test_unrecognised_line(self):
        event = parse_clone_progress("remote: Enumerating objects: 5, done.")
        assert event == CloneProgressEvent.other("remote: Enumerating objects: 5, done.")
        assert not event.has_percent
