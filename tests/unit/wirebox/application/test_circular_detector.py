"""Unit tests for CircularDependencyDetector."""

import threading

import pytest

from wirebox.application.circular_detector import CircularDependencyDetector
from wirebox.domain import CircularDependencyError


class TestCircularDependencyDetector:
    """Test cases for CircularDependencyDetector class."""

    def test_detector_initialization(self):
        """Test that the stack is created lazily."""
        detector = CircularDependencyDetector()

        assert not hasattr(detector._local, "stack")
        assert detector.depth() == 0

    def test_push_multiple_ids(self):
        """Test that push adds ids in sequence."""
        detector = CircularDependencyDetector()

        detector.push("a")
        detector.push("b")
        detector.push("c")

        assert detector._get_stack() == ["a", "b", "c"]
        assert detector.depth() == 3

    def test_push_detects_cycle(self):
        """Test that pushing an id already in the stack raises."""
        detector = CircularDependencyDetector()
        detector.push("a")
        detector.push("b")

        with pytest.raises(CircularDependencyError) as exc_info:
            detector.push("a")

        assert exc_info.value.dependency_chain == ["a", "b", "a"]

    def test_cycle_chain_starts_at_first_occurrence(self):
        """Test that ids before the cycle are left out of the chain."""
        detector = CircularDependencyDetector()
        detector.push("root")
        detector.push("a")
        detector.push("b")

        with pytest.raises(CircularDependencyError) as exc_info:
            detector.push("a")

        assert exc_info.value.dependency_chain == ["a", "b", "a"]

    def test_self_reference(self):
        """Test that an id depending on itself is detected."""
        detector = CircularDependencyDetector()
        detector.push("node")

        with pytest.raises(CircularDependencyError) as exc_info:
            detector.push("node")

        assert exc_info.value.dependency_chain == ["node", "node"]

    def test_pop_allows_reuse(self):
        """Test that an id can be pushed again after being popped."""
        detector = CircularDependencyDetector()
        detector.push("a")
        detector.pop()

        detector.push("a")

        assert detector._get_stack() == ["a"]

    def test_pop_on_empty_stack(self):
        """Test that popping an empty stack does nothing."""
        detector = CircularDependencyDetector()

        detector.pop()

        assert detector.depth() == 0

    def test_clear(self):
        """Test that clear empties the stack."""
        detector = CircularDependencyDetector()
        detector.push("a")
        detector.push("b")

        detector.clear()

        assert detector.depth() == 0

    def test_stacks_are_thread_local(self):
        """Test that each thread has its own stack."""
        detector = CircularDependencyDetector()
        detector.push("a")
        errors = []

        def resolve_in_thread():
            try:
                detector.push("a")
                detector.pop()
            except CircularDependencyError as e:
                errors.append(e)

        thread = threading.Thread(target=resolve_in_thread)
        thread.start()
        thread.join()

        assert errors == []
        assert detector._get_stack() == ["a"]


class TestTrack:
    """Test cases for the track context manager."""

    def test_track_pushes_and_pops(self):
        """Test that the id is on the stack only inside the block."""
        detector = CircularDependencyDetector()

        with detector.track("a"):
            assert detector._get_stack() == ["a"]

        assert detector.depth() == 0

    def test_track_pops_on_exception(self):
        """Test that a failing resolution leaves the stack clean."""
        detector = CircularDependencyDetector()

        with pytest.raises(RuntimeError):
            with detector.track("a"):
                raise RuntimeError("constructor failed")

        assert detector.depth() == 0

    def test_nested_track_detects_cycle(self):
        """Test that re-entering an id being tracked raises."""
        detector = CircularDependencyDetector()

        with pytest.raises(CircularDependencyError) as exc_info:
            with detector.track("a"):
                with detector.track("b"):
                    with detector.track("a"):
                        pass

        assert exc_info.value.dependency_chain == ["a", "b", "a"]
        assert detector.depth() == 0
