"""Reusable checks that any path kind, built-in or third-party, is expected to pass.

Subclass :py:class:`PathKindTests` in a pytest module, naming the subclass ``Test...`` so that it is collected:

>>> class TestMyPath(PathKindTests):
...     kind = MyPath
...     samples = ("my:/a/b", "my:/a/b/c.txt", "x/y")

The checks use plain ``assert`` statements and need nothing beyond the test runner.
"""

from collections.abc import Sequence
from itertools import product
from typing import ClassVar

from .errors import IncompatiblePathsError
from .path import AbstractPath, JoinPolicy
from .segments import CURDIR


class PathKindTests:
    kind: ClassVar[type[AbstractPath]]
    """The path kind under test."""

    samples: ClassVar[Sequence[str]]
    """Raw strings that the kind parses; mixing absolute and relative ones exercises more checks."""

    def _values(self) -> list[AbstractPath]:
        return [self.kind.parse(raw) for raw in self.samples]

    def test_round_trip(self) -> None:
        for value in self._values():
            assert self.kind.parse(value.to_text()) == value, value

    def test_parse_is_stable(self) -> None:
        for raw in self.samples:
            assert self.kind.parse(raw) == self.kind.parse(raw)
            assert hash(self.kind.parse(raw)) == hash(self.kind.parse(raw))

    def test_normalize_is_idempotent(self) -> None:
        for value in self._values():
            once = value.normalize()
            assert once.normalize() == once, value

    def test_normalize_keeps_anchor(self) -> None:
        for value in self._values():
            normalized = value.normalize()
            assert normalized.anchor == value.anchor, value
            assert normalized.is_absolute() == value.is_absolute(), value

    def test_parents_are_ordered_ancestors(self) -> None:
        for value in self._values():
            parents = value.parents

            for ancestor in parents:
                assert value.is_descendant(ancestor), (value, ancestor)

            for outer, inner in zip(parents, parents[1:]):
                assert inner.is_descendant(outer), (outer, inner)
                assert len(inner.segments) == len(outer.segments) + 1, (outer, inner)

            if parents:
                assert value.parent == parents[-1], value

    def test_descendant_mirrors_ascendant(self) -> None:
        for a, b in product(self._values(), repeat=2):
            assert a.is_descendant(b) == b.is_ascendant(a), (a, b)

    def test_ordering_is_consistent_with_equality(self) -> None:
        for a, b in product(self._values(), repeat=2):
            assert (a == b) == (not a < b and not b < a), (a, b)
            if a == b:
                assert hash(a) == hash(b), (a, b)

        values = sorted(self._values())
        for a, b in zip(values, values[1:]):
            assert a <= b, (a, b)

    def test_join_appends_segments(self) -> None:
        for a, b in product(self._values(), repeat=2):
            if b.is_absolute() or CURDIR in (a.segments + b.segments):
                continue

            joined = a.join(b)
            assert joined.segments == a.segments + b.segments, (a, b)
            assert joined.anchor == a.anchor, (a, b)

    def test_relative_leads_back(self) -> None:
        absolute = [value for value in self._values() if value.is_absolute() and value.root]

        for target, start in product(absolute, repeat=2):
            try:
                relative = target.relative(start)
            except IncompatiblePathsError:
                continue

            assert not relative.is_absolute(), (target, start)
            assert start.join(relative, policy=JoinPolicy.APPEND).normalize() == target.normalize(), (target, start)
