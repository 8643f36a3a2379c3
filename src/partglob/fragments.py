"""FragmentBuffer: one logical literal stored as an ordered list of segments.

A literal in a pattern can be interrupted by escape sequences (``ab\\*cd``
yields the segments ``"ab"`` and ``"*cd"``). Rather than joining the pieces,
the tokenizer appends each run to a buffer. Segment boundaries carry no
meaning: two buffers are equal iff their concatenated contents are equal.
"""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["FragmentBuffer"]


class FragmentBuffer:
    """Ordered collection of string segments forming a single literal."""

    __slots__ = ("_segments", "_length", "_frozen")

    def __init__(self, *segments: str) -> None:
        self._segments: list[str] = []
        self._length = 0
        self._frozen = False
        for segment in segments:
            self.append(segment)

    def append(self, segment: str) -> None:
        """Add a segment to the end of the buffer.

        Raises:
            AttributeError: If the buffer has been frozen.
        """
        if self._frozen:
            raise AttributeError("FragmentBuffer is frozen")
        self._segments.append(segment)
        self._length += len(segment)

    def freeze(self) -> FragmentBuffer:
        """Disallow further appends and return the buffer itself."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def combined_length(self) -> int:
        """Total length of all segments."""
        return self._length

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    def get(self, index: int) -> str | None:
        """Return the segment at ``index``, or None if there is none."""
        if 0 <= index < len(self._segments):
            return self._segments[index]
        return None

    def _next_non_empty(self, index: int) -> tuple[int, str] | None:
        for i in range(index, len(self._segments)):
            if self._segments[i]:
                return i, self._segments[i]
        return None

    def matches_prefix_of(self, target: str, start: int = 0) -> bool:
        """Check whether ``target[start:]`` begins with this buffer's content.

        Trailing characters in ``target`` beyond the content are allowed.
        """
        position = start
        for segment in self._segments:
            if not target.startswith(segment, position):
                return False
            position += len(segment)
        return True

    def find_all_occurrences_in(self, target: str, start: int = 0) -> Iterator[int]:
        """Lazily yield, in ascending order, every offset >= ``start`` at
        which this buffer's content occurs in ``target``.

        An empty buffer occurs at every offset, including ``len(target)``.
        """
        anchor = self._next_non_empty(0)
        if anchor is None:
            yield from range(start, len(target) + 1)
            return

        anchor_segment = anchor[1]
        cursor = start
        while cursor < len(target):
            hit = target.find(anchor_segment, cursor)
            if hit < 0:
                return
            cursor = hit + 1
            if self.matches_prefix_of(target, hit):
                yield hit

    def _content_equals(self, other: FragmentBuffer) -> bool:
        left_no, right_no = 0, 0
        left_pos, right_pos = 0, 0
        while True:
            left = self._next_non_empty(left_no)
            right = other._next_non_empty(right_no)
            if left is None or right is None:
                return left is None and right is None
            left_no, left_segment = left
            right_no, right_segment = right

            left_remaining = len(left_segment) - left_pos
            right_remaining = len(right_segment) - right_pos
            count = min(left_remaining, right_remaining)
            if (
                left_segment[left_pos : left_pos + count]
                != right_segment[right_pos : right_pos + count]
            ):
                return False

            if count == left_remaining:
                left_no += 1
                left_pos = 0
            else:
                left_pos += count
            if count == right_remaining:
                right_no += 1
                right_pos = 0
            else:
                right_pos += count

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FragmentBuffer):
            return self._length == other._length and self._content_equals(other)
        if isinstance(other, str):
            return self._length == len(other) and self.matches_prefix_of(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        return "".join(self._segments)

    def __repr__(self) -> str:
        return f"FragmentBuffer({', '.join(repr(s) for s in self._segments)})"
