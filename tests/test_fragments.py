"""Tests for FragmentBuffer."""

from __future__ import annotations

import pytest

from partglob.fragments import FragmentBuffer


def _occurrences(buffer: FragmentBuffer, target: str, start: int = 0) -> list[int]:
    return list(buffer.find_all_occurrences_in(target, start))


# === Construction and access ===


class TestSegments:
    def test_get_on_empty_buffer_returns_none(self) -> None:
        """get() on an empty buffer returns None instead of raising."""
        assert FragmentBuffer().get(0) is None

    def test_get_single_segment(self) -> None:
        """A buffer built from one segment exposes it at index 0."""
        assert FragmentBuffer("abc").get(0) == "abc"

    def test_get_after_append(self) -> None:
        """Appended segments are reachable by index; past the end is None."""
        buffer = FragmentBuffer("abc")
        buffer.append("def")
        assert buffer.get(0) == "abc"
        assert buffer.get(1) == "def"
        assert buffer.get(2) is None

    def test_segments_are_kept_as_appended(self) -> None:
        """Empty segments are stored, not dropped."""
        buffer = FragmentBuffer("", "ab", "", "c")
        assert buffer.segments == ("", "ab", "", "c")

    def test_str_joins_segments(self) -> None:
        """str() is the concatenated content."""
        assert str(FragmentBuffer("ab", "*", "cd")) == "ab*cd"


class TestCombinedLength:
    @pytest.mark.parametrize(
        "segments,expected",
        [
            ((), 0),
            (("",), 0),
            (("", ""), 0),
            (("abc",), 3),
            (("abc", "de", "f"), 6),
            (("", "ab", "", "", "c", "defgh", "", "i", ""), 9),
        ],
    )
    def test_combined_length(self, segments: tuple[str, ...], expected: int) -> None:
        """combined_length() is the sum of all segment lengths."""
        assert FragmentBuffer(*segments).combined_length() == expected

    def test_append_updates_combined_length(self) -> None:
        """The cached length follows appends."""
        buffer = FragmentBuffer("ab")
        buffer.append("cde")
        assert buffer.combined_length() == 5


# === Freezing ===


class TestFreeze:
    def test_new_buffer_is_not_frozen(self) -> None:
        """Buffers accept appends until frozen."""
        assert not FragmentBuffer("a").frozen

    def test_freeze_returns_same_buffer(self) -> None:
        """freeze() works in place and returns the buffer for chaining."""
        buffer = FragmentBuffer("a")
        assert buffer.freeze() is buffer
        assert buffer.frozen

    def test_append_after_freeze_raises(self) -> None:
        """A frozen buffer rejects appends and keeps its content."""
        buffer = FragmentBuffer("ab").freeze()
        with pytest.raises(AttributeError, match="frozen"):
            buffer.append("zzz")
        assert buffer == "ab"
        assert buffer.combined_length() == 2

    def test_freeze_is_idempotent(self) -> None:
        """Freezing twice is harmless."""
        buffer = FragmentBuffer("a").freeze().freeze()
        assert buffer.frozen

    def test_segments_cannot_be_mutated_through_property(self) -> None:
        """The segments property hands out a tuple snapshot."""
        buffer = FragmentBuffer("a", "b")
        assert isinstance(buffer.segments, tuple)

    def test_cannot_add_attributes(self) -> None:
        """__slots__ prevents attaching arbitrary state."""
        with pytest.raises(AttributeError):
            FragmentBuffer("a").extra = 1  # type: ignore[attr-defined]


# === Equality ===


class TestEquality:
    def test_equal_single_segments(self) -> None:
        """Identical single segments compare equal."""
        assert FragmentBuffer("abc") == FragmentBuffer("abc")

    def test_different_single_segments(self) -> None:
        """Different single segments compare unequal."""
        assert FragmentBuffer("abc") != FragmentBuffer("def")

    def test_equal_when_split_into_two(self) -> None:
        """Segment boundaries do not affect equality."""
        right = FragmentBuffer()
        right.append("ab")
        right.append("cd")
        assert FragmentBuffer("abcd") == right

    def test_equal_with_overlapping_boundaries(self) -> None:
        """Boundaries at different offsets on each side still compare equal."""
        assert FragmentBuffer("abc", "def") == FragmentBuffer("ab", "cd", "ef")

    def test_empty_buffer_equals_empty_segment(self) -> None:
        """No segments and one empty segment are the same content."""
        assert FragmentBuffer() == FragmentBuffer("")

    def test_trailing_empty_segment_ignored(self) -> None:
        """A trailing empty segment does not change the content."""
        assert FragmentBuffer("42") == FragmentBuffer("42", "")

    def test_leading_empty_segment_ignored(self) -> None:
        """A leading empty segment does not change the content."""
        assert FragmentBuffer("", "4", "2") == FragmentBuffer("42")

    def test_interspersed_empty_segments_ignored(self) -> None:
        """Empty segments anywhere are skipped during comparison."""
        left = FragmentBuffer("Hell", "", "o, ", "Worl", "", "d", "", "!")
        right = FragmentBuffer("He", "", "llo", "", ", W", "orl", "", "d!")
        assert left == right

    def test_split_and_interspersed_with_empty_pushes(self) -> None:
        """Splitting and padding with empty segments keeps equality."""
        whole = FragmentBuffer("abcd")
        assert whole == FragmentBuffer("ab", "cd")
        assert whole == FragmentBuffer("", "ab", "", "", "cd", "")

    def test_case_mismatch_is_unequal(self) -> None:
        """Comparison is case-sensitive."""
        left = FragmentBuffer("", "ab", "", "cd", "", "", "Ef")
        right = FragmentBuffer("a", "", "", "bc", "d", "", "e", "", "f")
        assert left != right

    def test_prefix_is_unequal(self) -> None:
        """A proper prefix is not equal in either direction."""
        assert FragmentBuffer("ab", "c") != FragmentBuffer("abcd")
        assert FragmentBuffer("abcd") != FragmentBuffer("ab", "c")

    def test_compares_with_plain_string(self) -> None:
        """A buffer equals a str with the same content."""
        buffer = FragmentBuffer("ab", "", "*cd")
        assert buffer == "ab*cd"
        assert buffer != "ab*c"
        assert buffer != "ab*cde"

    def test_equal_buffers_hash_equally(self) -> None:
        """Equal buffers share a hash regardless of segmentation."""
        assert hash(FragmentBuffer("ab", "cd")) == hash(FragmentBuffer("abcd"))

    def test_frozen_and_unfrozen_compare_by_content(self) -> None:
        """Freezing does not take part in equality."""
        assert FragmentBuffer("ab").freeze() == FragmentBuffer("a", "b")

    def test_unrelated_type_is_unequal(self) -> None:
        """Comparison with a non-string type is False, not an error."""
        assert FragmentBuffer("1") != 1


# === Prefix matching ===


class TestMatchesPrefixOf:
    def test_empty_buffer_matches_anything(self) -> None:
        """An empty buffer is a prefix of every string."""
        buffer = FragmentBuffer()
        assert buffer.matches_prefix_of("abc")
        assert buffer.matches_prefix_of("")
        assert buffer.matches_prefix_of("42")

    def test_empty_segments_match_anything(self) -> None:
        """Only-empty segments behave like an empty buffer."""
        buffer = FragmentBuffer("", "")
        assert buffer.matches_prefix_of("")
        assert buffer.matches_prefix_of("4711")

    def test_does_not_match_shorter_string(self) -> None:
        """Content longer than the target never matches."""
        assert not FragmentBuffer("", "", "a").matches_prefix_of("")
        assert not FragmentBuffer("123").matches_prefix_of("12")

    def test_matches_identical_string(self) -> None:
        """A target equal to the content matches."""
        assert FragmentBuffer("abc").matches_prefix_of("abc")
        assert FragmentBuffer("ab", "", "c", "").matches_prefix_of("abc")

    def test_matches_longer_string(self) -> None:
        """Trailing characters in the target are allowed."""
        assert FragmentBuffer("", "", "a", "", "", "bc").matches_prefix_of("abcd")

    def test_matches_with_start_offset(self) -> None:
        """The prefix test starts at the given offset."""
        buffer = FragmentBuffer("", "a", "", "", "n", "")
        assert buffer.matches_prefix_of("banana", 1)
        assert buffer.matches_prefix_of("banana", 3)
        assert not buffer.matches_prefix_of("banana", 5)

    def test_does_not_match_unrelated_string(self) -> None:
        """Unrelated content does not match."""
        buffer = FragmentBuffer("", "", "a", "b", "", "", "cdef", "", "")
        assert not buffer.matches_prefix_of("foo")

    def test_only_tests_the_start(self) -> None:
        """Content later in the target is not a prefix match."""
        buffer = FragmentBuffer("def")
        assert not buffer.matches_prefix_of("abcdef")
        assert buffer.matches_prefix_of("abcdef", 3)


# === Occurrence search ===


class TestFindAllOccurrencesIn:
    def test_empty_buffer_in_empty_string(self) -> None:
        """An empty buffer occurs once in the empty string."""
        assert _occurrences(FragmentBuffer(), "") == [0]

    def test_empty_buffer_occurs_everywhere(self) -> None:
        """An empty buffer occurs at every offset including the end."""
        assert _occurrences(FragmentBuffer(), "abc") == [0, 1, 2, 3]
        assert _occurrences(FragmentBuffer(""), "ab") == [0, 1, 2]
        assert _occurrences(FragmentBuffer("", "", ""), "foobar") == [0, 1, 2, 3, 4, 5, 6]

    def test_empty_buffer_respects_start(self) -> None:
        """Offsets before start are not reported."""
        assert _occurrences(FragmentBuffer(), "abc", 2) == [2, 3]

    def test_non_empty_buffer_in_empty_string(self) -> None:
        """Non-empty content never occurs in ''."""
        assert _occurrences(FragmentBuffer("a"), "") == []

    def test_whole_string(self) -> None:
        """Content equal to the target occurs at offset 0."""
        assert _occurrences(FragmentBuffer("Hello, World"), "Hello, World") == [0]
        assert _occurrences(FragmentBuffer("Hello, ", "World"), "Hello, World") == [0]

    def test_partial_content_is_not_an_occurrence(self) -> None:
        """Matching only the first segment is not enough."""
        assert _occurrences(FragmentBuffer("Hello, ", "World"), "Hello, ") == []

    def test_occurrence_inside_string(self) -> None:
        """Occurrences away from the start are found."""
        assert _occurrences(FragmentBuffer("llo"), "Hello, World!") == [2]
        buffer = FragmentBuffer("", "", "el", "", "lo", "")
        assert _occurrences(buffer, "Hello, World!") == [1]

    def test_multiple_occurrences(self) -> None:
        """All occurrences are reported in ascending order."""
        assert _occurrences(FragmentBuffer("", "a", "", "", "n", ""), "banana") == [1, 3]
        assert _occurrences(FragmentBuffer("", "a", "", "", "n", "", ""), "ananas") == [0, 2]

    def test_overlapping_occurrences(self) -> None:
        """Overlapping occurrences are each reported."""
        assert _occurrences(FragmentBuffer("a", "a"), "aaaa") == [0, 1, 2]

    def test_anchor_hit_without_full_match_is_skipped(self) -> None:
        """A hit of the first segment alone is not an occurrence."""
        assert _occurrences(FragmentBuffer("ab", "x"), "abyabx") == [3]

    def test_occurrences_respect_start(self) -> None:
        """The search begins at the given offset."""
        assert _occurrences(FragmentBuffer("an"), "banana", 2) == [3]

    def test_search_is_lazy(self) -> None:
        """Occurrences are produced on demand."""
        occurrences = FragmentBuffer("a").find_all_occurrences_in("aaa")
        assert next(occurrences) == 0
        assert next(occurrences) == 1
