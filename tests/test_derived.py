"""Derived operations: behaviour built only from the primitive core."""

import logging

import pytest

from listcore import ArraySequence, LinkedSequence


class TestSingleElementOperations:
    def test_append_always_reports_change(self, make):
        seq = make()
        assert seq.append("a") is True
        assert seq.append("a") is True
        assert seq.to_array() == ["a", "a"]

    def test_is_empty(self, make):
        assert make().is_empty()
        assert not make("a").is_empty()

    def test_remove_value_removes_first_occurrence_only(self, make):
        seq = make("a", "b", "a")

        assert seq.remove_value("a") is True
        assert seq.to_array() == ["b", "a"]

    def test_remove_value_absent_leaves_sequence_unchanged(self, make):
        seq = make("a", "b")

        assert seq.remove_value("z") is False
        assert seq.to_array() == ["a", "b"]

    def test_clear(self, make):
        seq = make("a", "b", "c")
        seq.clear()
        assert seq.is_empty()
        assert seq.to_array() == []


class TestContainsAll:
    def test_all_present_with_duplicates_in_argument(self, make):
        seq = make("a", "b", "c")
        assert seq.contains_all(["a", "a", "c"])

    def test_one_missing(self, make):
        seq = make("a", "b")
        assert not seq.contains_all(["a", "z"])

    def test_empty_argument_is_always_contained(self, make):
        assert make("a").contains_all([])
        assert make().contains_all([])

    def test_short_circuits_on_first_miss(self, make):
        seq = make("a")

        def others():
            yield "z"
            raise AssertionError("argument consumed past the first miss")

        assert not seq.contains_all(others())


class TestAddAll:
    def test_appends_in_iteration_order(self, make):
        seq = make("a")

        assert seq.add_all(["b", "c"]) is True
        assert seq.to_array() == ["a", "b", "c"]

    def test_empty_argument_reports_no_change(self, make):
        seq = make("a")
        assert seq.add_all([]) is False
        assert seq.to_array() == ["a"]

    def test_accepts_generators(self, make):
        seq = make()
        assert seq.add_all(str(i) for i in range(3))
        assert seq.to_array() == ["0", "1", "2"]

    def test_adding_a_sequence_to_itself_doubles_it(self, make):
        seq = make("a", "b")
        assert seq.add_all(seq) is True
        assert seq.to_array() == ["a", "b", "a", "b"]


class TestRemoveAll:
    def test_strips_every_occurrence(self, make):
        """[a, b, a, c, a] minus [a] is [b, c]: all three a's go."""
        seq = make("a", "b", "a", "c", "a")

        assert seq.remove_all(["a"]) is True
        assert seq.to_array() == ["b", "c"]

    def test_duplicates_in_argument_do_not_change_the_outcome(self, make):
        """Not a multiset difference: one or many a's in the argument behave alike."""
        once = make("a", "b", "a", "a")
        twice = make("a", "b", "a", "a")

        once.remove_all(["a"])
        twice.remove_all(["a", "a"])

        assert once.to_array() == twice.to_array() == ["b"]

    def test_multiple_values(self, make):
        seq = make("a", "b", "c", "b", "d")

        assert seq.remove_all(["b", "d", "z"]) is True
        assert seq.to_array() == ["a", "c"]

    def test_no_match_reports_no_change(self, make):
        seq = make("a", "b")

        assert seq.remove_all(["z"]) is False
        assert seq.remove_all([]) is False
        assert seq.to_array() == ["a", "b"]

    def test_removing_a_sequence_from_itself_empties_it(self, make):
        seq = make("a", "b", "a")
        assert seq.remove_all(seq) is True
        assert seq.is_empty()

    def test_logs_number_of_removals(self, make, caplog):
        seq = make("a", "b", "a", "c", "a")

        with caplog.at_level(logging.DEBUG, logger="listcore"):
            seq.remove_all(["a"])

        assert "remove_all() removed 3 element(s)" in caplog.text


class TestRetainAll:
    def test_keeps_matching_elements_in_order(self, make):
        seq = make("a", "b", "a", "c")

        assert seq.retain_all(["a", "c"]) is True
        assert seq.to_array() == ["a", "a", "c"]

    def test_single_argument_occurrence_retains_every_duplicate(self, make):
        seq = make("a", "a", "a", "b")

        seq.retain_all(["a"])

        assert seq.to_array() == ["a", "a", "a"]

    def test_nothing_removed_reports_no_change(self, make):
        seq = make("a", "b")

        assert seq.retain_all(["a", "b", "z"]) is False
        assert seq.to_array() == ["a", "b"]

    def test_empty_argument_clears_the_sequence(self, make):
        seq = make("a", "b")

        assert seq.retain_all([]) is True
        assert seq.is_empty()

    def test_retaining_itself_changes_nothing(self, make):
        seq = make("a", "b", "a")
        assert seq.retain_all(seq) is False
        assert seq.to_array() == ["a", "b", "a"]

    def test_adjacent_removals_are_not_skipped(self, make):
        seq = make("x", "x", "a", "x", "x", "b", "x")

        seq.retain_all(["a", "b"])

        assert seq.to_array() == ["a", "b"]


class TestPythonProtocol:
    def test_len_index_and_membership(self, make):
        seq = make("a", "b")

        assert len(seq) == 2
        assert seq[1] == "b"
        assert "a" in seq
        assert "z" not in seq

    def test_item_assignment_and_deletion(self, make):
        seq = make("a", "b", "c")

        seq[0] = "x"
        del seq[1]

        assert seq.to_array() == ["x", "c"]

    def test_iteration(self, make):
        assert list(make("a", "b", "c")) == ["a", "b", "c"]

    def test_truthiness(self, make):
        assert not make()
        assert make("a")

    def test_equality(self, make):
        seq = make(1, 2, 3)

        assert seq == [1, 2, 3]
        assert seq == (1, 2, 3)
        assert seq == ArraySequence(items=[1, 2, 3])
        assert seq == LinkedSequence(items=[1, 2, 3])
        assert seq != [1, 2]
        assert seq != [3, 2, 1]
        assert seq != "123"

    def test_sequences_are_unhashable(self, make):
        with pytest.raises(TypeError):
            hash(make("a"))

    def test_negative_subscripts_are_out_of_range(self, make):
        seq = make("a")
        with pytest.raises(IndexError):
            seq[-1]

    def test_repr(self, container):
        seq = container(items=["a", "b"])
        assert repr(seq) == f"{container.__name__}(['a', 'b'])"


class TestEqualityMatching:
    """Bulk operations match with == only, the same way index_of does."""

    def test_self_unequal_element_is_not_retained(self, make):
        nan = float("nan")
        seq = make(nan, 1)

        assert not seq.contains(nan)
        assert seq.retain_all([nan, 1]) is True
        assert seq.to_array() == [1]

    def test_self_unequal_element_is_not_removed(self, make):
        nan = float("nan")
        seq = make(nan, 1)

        assert seq.remove_all([nan, nan]) is False
        assert seq.size() == 2
        assert seq.get(1) == 1

    def test_self_unequal_element_is_not_contained(self, make):
        nan = float("nan")
        seq = make(nan)

        assert not seq.contains_all([nan])
        assert seq.contains_all([])
