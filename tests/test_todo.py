"""Tests for the Task model."""

from datetime import date

import pytest

from taskbot.exceptions import IncompleteDescriptionError, InvalidInputError
from taskbot.todo import Task, TaskKind


class TestTodo:
    """Plain to-do behaviour."""

    def test_todo_creation(self):
        """A new to-do is not done."""
        task = Task.todo("read book")

        assert task.kind == TaskKind.TODO
        assert task.name == "read book"
        assert task.is_done is False
        assert task.dates == ()

    @pytest.mark.parametrize("name", ["read book", "x", "buy milk and eggs"])
    def test_render_and_mark(self, name):
        """Rendering follows the completion flag."""
        task = Task.todo(name)
        assert task.render() == f"[T][ ] {name}"

        task.mark_done()
        assert task.render() == f"[T][X] {name}"
        assert str(task) == f"[T][X] {name}"

    def test_mark_is_idempotent(self):
        """Marking twice or unmarking an undone task is not an error."""
        task = Task.todo("read book")
        task.mark_done()
        task.mark_done()
        assert task.is_done

        task.unmark_done()
        task.unmark_done()
        assert not task.is_done

    def test_encode(self):
        """Storage line of a to-do."""
        task = Task.todo("read book", is_done=True)
        assert task.encode() == "T | 1 | read book"

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_blank_name_rejected(self, name):
        """Names must contain something other than whitespace."""
        with pytest.raises(IncompleteDescriptionError) as exc:
            Task.todo(name)
        assert exc.value.message == "The description of a todo cannot be empty!"

    def test_multiline_name_rejected(self):
        """A name has to fit on a single storage line."""
        with pytest.raises(InvalidInputError):
            Task.todo("first\nsecond")


class TestDeadline:
    """Deadline behaviour."""

    def test_render(self):
        """Due date is shown in long form."""
        task = Task.deadline("get food", date(2024, 11, 11))
        assert task.render() == "[D][ ] get food (by: 11 November 2024)"

    def test_encode(self):
        """Due date is stored in compact form."""
        task = Task.deadline("get food", date(2024, 11, 11))
        assert task.encode() == "D | 0 | get food | 2024/11/11"

    def test_render_pads_day(self):
        """Single-digit days are zero padded."""
        task = Task.deadline("pay rent", date(2025, 3, 1))
        assert task.render() == "[D][ ] pay rent (by: 01 March 2025)"

    def test_due_date_required(self):
        """A deadline without a date cannot exist."""
        with pytest.raises(InvalidInputError):
            Task(TaskKind.DEADLINE, "get food")

    def test_todo_rejects_dates(self):
        """Dates that do not belong to the kind are refused."""
        with pytest.raises(InvalidInputError):
            Task(TaskKind.TODO, "read", due_date=date(2024, 1, 1))


class TestEvent:
    """Event behaviour."""

    def test_render(self):
        task = Task.event("book fair", date(2024, 11, 1), date(2024, 11, 3))
        assert task.render() == "[E][ ] book fair (from: 01 November 2024 to: 03 November 2024)"

    def test_encode(self):
        task = Task.event("book fair", date(2024, 11, 1), date(2024, 11, 3), is_done=True)
        assert task.encode() == "E | 1 | book fair | 2024/11/01 | 2024/11/03"

    def test_same_day_event(self):
        """An event may start and end on the same day."""
        task = Task.event("party", date(2024, 5, 5), date(2024, 5, 5))
        assert task.start_date == task.end_date

    def test_end_before_start_rejected(self):
        """Start has to be on or before end."""
        with pytest.raises(InvalidInputError):
            Task.event("party", date(2024, 5, 6), date(2024, 5, 5))

    def test_dates_in_storage_order(self):
        task = Task.event("trip", date(2024, 6, 1), date(2024, 6, 9))
        assert task.dates == (date(2024, 6, 1), date(2024, 6, 9))


class TestImmutability:
    """Only the completion flag may change."""

    def test_fields_are_read_only(self):
        task = Task.deadline("get food", date(2024, 11, 11))

        with pytest.raises(AttributeError):
            task.name = "something else"
        with pytest.raises(AttributeError):
            task.due_date = date(2025, 1, 1)

        assert task.name == "get food"

    def test_done_flag_is_writable(self):
        task = Task.todo("read book")
        task.is_done = True
        assert task.render() == "[T][X] read book"


class TestKeywordMatching:
    """Whole-word keyword matching used by find."""

    def setup_method(self):
        self.task = Task.todo("buy food today")

    @pytest.mark.parametrize("keyword", ["food", "buy", "today", "buy food", "food today"])
    def test_whole_words_match(self, keyword):
        assert self.task.matches_keyword(keyword)

    @pytest.mark.parametrize("keyword", ["foo", "ood", "Food", "day", "buy  food"])
    def test_partial_words_do_not_match(self, keyword):
        assert not self.task.matches_keyword(keyword)

    def test_longer_word_does_not_match(self):
        assert not Task.todo("foodie market").matches_keyword("food")

    @pytest.mark.parametrize("keyword", ["", " ", "  "])
    def test_blank_keyword_never_matches(self, keyword):
        assert not Task.todo("a  b").matches_keyword(keyword)
