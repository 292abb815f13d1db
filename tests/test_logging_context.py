"""Tests for logging context propagation."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from billtext.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
    submit_with_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


class TestPushPop:
    """Tests for the token-based API."""

    def test_starts_empty(self):
        assert get_log_context() == {}

    def test_push_and_pop(self):
        token = push_log_context(comparison_id="c0ffee", side="left")
        assert get_log_context() == {"comparison_id": "c0ffee", "side": "left"}

        pop_log_context(token)
        assert get_log_context() == {}

    def test_nested_pushes_restore_in_order(self):
        outer = push_log_context(comparison_id="c0ffee")
        inner = push_log_context(side="right", source="amendment.pdf")

        assert get_log_context() == {
            "comparison_id": "c0ffee",
            "side": "right",
            "source": "amendment.pdf",
        }

        pop_log_context(inner)
        assert get_log_context() == {"comparison_id": "c0ffee"}

        pop_log_context(outer)
        assert get_log_context() == {}

    def test_later_push_overrides_field(self):
        outer = push_log_context(side="left")
        inner = push_log_context(side="right")
        assert get_log_context() == {"side": "right"}

        pop_log_context(inner)
        assert get_log_context() == {"side": "left"}
        pop_log_context(outer)

    def test_clear(self):
        push_log_context(comparison_id="c0ffee")
        clear_log_context()
        assert get_log_context() == {}

    def test_returns_copy(self):
        token = push_log_context(comparison_id="c0ffee")

        context = get_log_context()
        context["side"] = "modified"

        assert get_log_context() == {"comparison_id": "c0ffee"}
        pop_log_context(token)


class TestLogContextManager:
    """Tests for the log_context context manager."""

    def test_scoped_fields(self):
        with log_context(comparison_id="c0ffee"):
            assert get_log_context() == {"comparison_id": "c0ffee"}

            with log_context(side="left"):
                assert get_log_context() == {"comparison_id": "c0ffee", "side": "left"}

            assert get_log_context() == {"comparison_id": "c0ffee"}

        assert get_log_context() == {}

    def test_yields_active_fields(self):
        with log_context(comparison_id="c0ffee"):
            with log_context(side="left") as fields:
                assert fields == {"comparison_id": "c0ffee", "side": "left"}

    def test_restored_after_exception(self):
        with pytest.raises(ValueError):
            with log_context(comparison_id="c0ffee"):
                raise ValueError("boom")

        assert get_log_context() == {}

    def test_worker_threads_see_copied_context(self):
        def read_side(side):
            with log_context(side=side):
                return get_log_context()

        with log_context(comparison_id="c0ffee"):
            with ThreadPoolExecutor(max_workers=2) as executor:
                left = submit_with_context(executor, read_side, "left")
                right = submit_with_context(executor, read_side, "right")
                results = [left.result(), right.result()]

        assert results == [
            {"comparison_id": "c0ffee", "side": "left"},
            {"comparison_id": "c0ffee", "side": "right"},
        ]
        assert get_log_context() == {}
