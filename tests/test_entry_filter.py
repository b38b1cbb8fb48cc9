"""Tests for selecting and ordering entries for the entry list."""

from copy import deepcopy

import pytest

from trackmytime.service.entry import running_entries, select_entries


@pytest.fixture
def sample(make_entry, at):
    a = make_entry(at(2024, 6, 1, 9), at(2024, 6, 1, 10), "p1", ["t1"], id="a")
    b = make_entry(at(2024, 6, 2, 9), at(2024, 6, 2, 10), "p2", ["t1", "t2"], id="b")
    c = make_entry(at(2024, 6, 3, 9), None, "p1", [], id="c")
    d = make_entry(at(2024, 6, 4, 9), at(2024, 6, 4, 11), None, ["t2"], id="d")
    return [a, b, c, d]


def ids(entries):
    return [entry["id"] for entry in entries]


class TestInclusion:
    def test_project_filter_newest_first(self, make_entry, at):
        a = make_entry(at(2024, 1, 1, 0, 0, 1), project_id="P1", id="A")
        b = make_entry(at(2024, 1, 1, 0, 0, 2), project_id="P2", id="B")
        c = make_entry(at(2024, 1, 1, 0, 0, 3), project_id="P1", id="C")

        result = select_entries([a, b, c], project_id="P1", newest_first=True)

        assert ids(result) == ["C", "A"]

    def test_no_filters_keeps_everything(self, sample):
        assert sorted(ids(select_entries(sample))) == ["a", "b", "c", "d"]

    def test_tag_filter(self, sample):
        assert ids(select_entries(sample, tag_id="t2")) == ["d", "b"]

    def test_project_and_tag_filters_combine(self, sample):
        assert ids(select_entries(sample, project_id="p1", tag_id="t1")) == ["a"]

    def test_unmatched_ids_give_empty_list(self, sample):
        assert select_entries(sample, project_id="missing") == []
        assert select_entries(sample, tag_id="missing") == []

    def test_empty_input(self):
        assert select_entries([], project_id="p1", tag_id="t1") == []

    def test_unassigned_entries_only_pass_without_project_filter(self, sample):
        assert "d" not in ids(select_entries(sample, project_id="p1"))
        assert "d" in ids(select_entries(sample))

    def test_every_match_appears_exactly_once(self, sample):
        result = select_entries(sample, tag_id="t1")
        expected = [e for e in sample if "t1" in e["tag_ids"]]
        assert sorted(ids(result)) == sorted(ids(expected))
        assert len(set(ids(result))) == len(result)


class TestOrdering:
    def test_newest_first_is_descending(self, sample):
        starts = [e["start"] for e in select_entries(sample, newest_first=True)]
        assert starts == sorted(starts, reverse=True)

    def test_oldest_first_is_ascending(self, sample):
        starts = [e["start"] for e in select_entries(sample, newest_first=False)]
        assert starts == sorted(starts)

    def test_flag_reverses_order(self, sample):
        newest = ids(select_entries(sample, newest_first=True))
        oldest = ids(select_entries(sample, newest_first=False))
        assert newest == list(reversed(oldest))

    def test_ties_keep_input_order(self, make_entry, at):
        same_start = at(2024, 6, 1, 9)
        first = make_entry(same_start, id="first")
        second = make_entry(same_start, id="second")
        later = make_entry(at(2024, 6, 1, 10), id="later")

        assert ids(select_entries([first, second, later], newest_first=True)) == [
            "later",
            "first",
            "second",
        ]
        assert ids(select_entries([first, second, later], newest_first=False)) == [
            "first",
            "second",
            "later",
        ]

    def test_input_is_not_modified(self, sample):
        snapshot = deepcopy(sample)
        select_entries(sample, project_id="p1", newest_first=False)
        assert sample == snapshot


class TestRunningEntries:
    def test_only_entries_without_end(self, sample, make_entry, at):
        other = make_entry(at(2024, 6, 5, 9), None, "p2", id="e")
        assert ids(running_entries(sample + [other])) == ["e", "c"]

    def test_none_running(self, make_entry, at):
        closed = make_entry(at(2024, 6, 1, 9), at(2024, 6, 1, 10))
        assert running_entries([closed]) == []
