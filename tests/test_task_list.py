"""Tests for the TaskList engine."""

from datetime import date

import pytest

from taskbot.exceptions import OutOfBoundsError
from taskbot.task_list import EMPTY_LIST_MESSAGE, TaskList
from taskbot.todo import Task


class TestTaskListMutation:
    """add / delete / mark / unmark."""

    def setup_method(self):
        self.tasks = TaskList()

    def test_add_reports_new_size(self):
        message = self.tasks.add(Task.todo("read book"))

        assert message == ("Got it. I've added this task:\n [T][ ] read book\n"
                           "Now you have 1 task(s) in your list.\n")
        assert len(self.tasks) == 1

    def test_duplicates_allowed(self):
        self.tasks.add(Task.todo("read book"))
        self.tasks.add(Task.todo("read book"))
        assert len(self.tasks) == 2

    def test_delete(self):
        self.tasks.add(Task.todo("a"))
        self.tasks.add(Task.deadline("b", date(2024, 11, 11)))

        message = self.tasks.delete(1)

        assert message == ("Noted. I've removed this task:\n [D][ ] b (by: 11 November 2024)\n"
                           "Now you have 1 task(s) in the list.\n")
        assert [t.name for t in self.tasks] == ["a"]

    def test_mark_and_unmark(self):
        self.tasks.add(Task.todo("read book"))

        assert self.tasks.mark_done(0) == "Nice! I've marked this task as done:\n [T][X] read book\n"
        assert self.tasks[0].is_done

        assert self.tasks.unmark_done(0) == (
            "OK, I've marked this task as not done:\n [T][ ] read book\n"
        )
        assert not self.tasks[0].is_done

    @pytest.mark.parametrize("operation", ["delete", "mark_done", "unmark_done"])
    def test_out_of_bounds_never_mutates(self, operation):
        """Index -1 and index == size are rejected before any change."""
        self.tasks.add(Task.todo("a"))
        self.tasks.add(Task.todo("b"))
        before = self.tasks.to_list()
        flags = [t.is_done for t in before]

        for index in (-1, len(self.tasks)):
            with pytest.raises(OutOfBoundsError) as exc:
                getattr(self.tasks, operation)(index)
            assert "does not exist" in exc.value.message

        assert self.tasks.to_list() == before
        assert [t.is_done for t in self.tasks] == flags

    def test_empty_list_rejects_any_index(self):
        with pytest.raises(OutOfBoundsError):
            self.tasks.mark_done(0)

    def test_mark_second_item_on_single_item_list(self):
        self.tasks.add(Task.todo("read book"))

        with pytest.raises(OutOfBoundsError):
            self.tasks.mark_done(1)
        assert not self.tasks[0].is_done


class TestTaskListQueries:
    """list / find."""

    def setup_method(self):
        self.tasks = TaskList([
            Task.todo("buy food today"),
            Task.todo("visit foodie market"),
            Task.deadline("food bank donation", date(2024, 11, 11)),
        ])

    def test_empty_list(self):
        assert TaskList().list() == EMPTY_LIST_MESSAGE
        assert EMPTY_LIST_MESSAGE == "There are no items in the list.\n"

    def test_list_is_numbered_from_one(self):
        assert self.tasks.list() == (
            "Here are the tasks in your list:"
            "\n1. [T][ ] buy food today"
            "\n2. [T][ ] visit foodie market"
            "\n3. [D][ ] food bank donation (by: 11 November 2024)"
        )

    def test_find_whole_words_only(self):
        """Matches are renumbered from one and skip partial words."""
        assert self.tasks.find("food") == (
            "Here are the matching tasks in your list:"
            "\n1. [T][ ] buy food today"
            "\n2. [D][ ] food bank donation (by: 11 November 2024)"
        )

    def test_find_no_match(self):
        assert self.tasks.find("car") == 'None of the items in your list matches with "car"'

    def test_find_empty_keyword(self):
        assert self.tasks.find("") == 'None of the items in your list matches with ""'

    def test_find_does_not_mutate(self):
        before = self.tasks.to_list()
        self.tasks.find("food")
        assert self.tasks.to_list() == before


class TestTaskListContainer:

    def test_equality_and_iteration(self):
        first = TaskList([Task.todo("a"), Task.todo("b")])
        second = TaskList([Task.todo("a"), Task.todo("b")])

        assert first == second
        assert [t.name for t in first] == ["a", "b"]
        assert first.size == 2

    def test_getitem_checks_bounds(self):
        with pytest.raises(OutOfBoundsError):
            TaskList([Task.todo("a")])[3]

    def test_constructor_copies_input(self):
        source = [Task.todo("a")]
        tasks = TaskList(source)
        source.append(Task.todo("b"))
        assert len(tasks) == 1
