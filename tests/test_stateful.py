import pytest

import lazyseq as ls
from lazyseq import create

from .support import Resurrecting, payload


class TestRemember:
    """remember"""

    def test_construction_pulls_nothing(self, counted_naturals, pulls):
        ls.remember(counted_naturals)
        assert pulls == []

    def test_each_position_pulled_once(self, counted_naturals, pulls):
        remembered = ls.remember(counted_naturals)
        assert list(ls.take(remembered, 3)) == [0, 1, 2]
        assert list(ls.take(remembered, 5)) == [0, 1, 2, 3, 4]
        assert pulls == [0, 1, 2, 3, 4]
        assert remembered.buffered == 5

    def test_interleaved_cursors_share_upstream(self, counted_naturals, pulls):
        remembered = ls.remember(counted_naturals)
        first = remembered.cursor()
        second = remembered.cursor()
        assert payload(first.advance()) == 0
        assert payload(second.advance()) == 0
        assert payload(second.advance()) == 1
        assert payload(first.advance()) == 1
        assert payload(first.advance()) == 2
        assert pulls == [0, 1, 2]

    def test_generator_becomes_replayable(self):
        remembered = ls.remember(x * x for x in range(4))
        assert list(remembered) == [0, 1, 4, 9]
        assert list(remembered) == [0, 1, 4, 9]
        assert remembered.exhausted

    def test_trailing_value_replayed(self):
        def gen():
            yield 1
            return "tail"

        remembered = ls.remember(gen())
        for _ in range(2):
            cursor = remembered.cursor()
            assert payload(cursor.advance()) == 1
            assert payload(cursor.advance()) == "tail"

    def test_not_exhausted_until_end_seen(self):
        remembered = ls.remember([1, 2])
        assert list(ls.take(remembered, 2)) == [1, 2]
        assert not remembered.exhausted
        assert list(remembered) == [1, 2]
        assert remembered.exhausted

    def test_remembered_is_a_seq(self):
        assert isinstance(ls.remember([]), ls.Seq)


class TestPeekable:
    """peekable"""

    def test_peek_does_not_move(self):
        cursor = ls.peekable([1, 2])
        first = cursor.peek()
        assert cursor.peek() is first
        assert cursor.advance() is first
        assert payload(cursor.peek()) == 2
        assert payload(cursor.advance()) == 2

    def test_peek_pulls_upstream_once(self, counted_naturals, pulls):
        cursor = ls.peekable(counted_naturals)
        cursor.peek()
        cursor.peek()
        assert pulls == [0]
        cursor.advance()
        assert pulls == [0]
        cursor.advance()
        assert pulls == [0, 1]

    def test_peek_at_end(self):
        cursor = ls.peekable([])
        end = cursor.peek()
        assert ls.is_done(end)
        assert cursor.advance() is end
        assert cursor.peek() is end
        assert cursor.finished

    def test_peekable_iterates(self):
        cursor = ls.peekable("ab")
        assert payload(cursor.peek()) == "a"
        assert list(cursor) == ["a", "b"]


class TestFlat:
    """flat"""

    def test_default_depth_is_one(self):
        assert list(ls.flat([1, [2, [3]], 4])) == [1, 2, [3], 4]

    def test_depth_two(self):
        assert list(ls.flat([1, [2, [3, [4]]]], 2)) == [1, 2, 3, [4]]

    @pytest.mark.parametrize("items", [[1, [2], [[3]]], [], ["ab", ("c",)]])
    def test_depth_zero_is_passthrough(self, items):
        assert list(ls.flat(items, 0)) == items

    def test_flattens_sequences_and_tuples(self):
        nested = [create.range(2), (3, 4), [5]]
        assert list(ls.flat(nested)) == [0, 1, 2, 3, 4, 5]

    def test_strings_are_leaves(self):
        assert list(ls.flat(["ab", ["cd"]])) == ["ab", "cd"]

    def test_dicts_are_leaves(self):
        mapping = {"a": 1}
        assert list(ls.flat([mapping, [mapping]])) == [mapping, mapping]

    def test_empty_nested(self):
        assert list(ls.flat([[], [1], []])) == [1]

    def test_flat_is_lazy(self, counted_naturals, pulls):
        nested = ls.map(counted_naturals, lambda n: [n, n])
        assert list(ls.take(ls.flat(nested), 3)) == [0, 0, 1]
        assert pulls == [0, 1]

    @pytest.mark.parametrize("depth", [-1, 0.5, "1", None, True])
    def test_invalid_depth_rejected_at_call_time(self, depth):
        with pytest.raises(ls.DepthError) as exc_info:
            ls.flat([[1]], depth)
        assert exc_info.value.depth == depth

    def test_integral_float_depth_accepted(self):
        assert list(ls.flat([[1, [2]]], 2.0)) == [1, 2]


class TestCompleteFlat:
    """complete_flat"""

    def test_only_leaves_remain(self):
        nested = [1, [2, [3, (4, create.range(5, 6))]], [[[]]], 7]
        assert list(ls.complete_flat(nested)) == [1, 2, 3, 4, 5, 6, 7]

    def test_strings_are_leaves(self):
        assert list(ls.complete_flat([["ab", ["c"]], "d"])) == ["ab", "c", "d"]

    def test_deep_nesting_has_no_recursion_limit(self):
        nested = [0]
        for _ in range(3000):
            nested = [nested]
        assert list(ls.complete_flat(nested)) == [0]

    def test_nestable_subclass_is_nested(self):
        class Bag(ls.Nestable):
            def __init__(self, *items):
                self.items = items

            def __iter__(self):
                return iter(self.items)

        assert list(ls.complete_flat([Bag(1, Bag(2)), 3])) == [1, 2, 3]

    def test_plain_iterable_class_is_a_leaf(self):
        class Pouch:
            def __init__(self, *items):
                self.items = items

            def __iter__(self):
                return iter(self.items)

        pouch = Pouch(1, 2)
        assert list(ls.complete_flat([pouch])) == [pouch]

    def test_endless_inner_sequence(self):
        nested = [[create.increments()]]
        assert list(ls.take(ls.complete_flat(nested), 3)) == [0, 1, 2]


class TestFuse:
    """fuse"""

    def test_foreign_cursor_stays_done(self):
        foreign = Resurrecting()
        fused = ls.fuse(foreign)
        assert list(fused) == [1]
        assert foreign.calls == 2

    def test_cursor_overriding_advance(self):
        class Flaky(ls.Cursor[int]):
            __slots__ = ("calls",)

            def __init__(self):
                super().__init__()
                self.calls = 0

            def _advance(self):
                raise AssertionError("advance() is overridden")

            def advance(self):
                self.calls += 1
                if self.calls % 2 == 0:
                    return ls.done()
                return ls.value(self.calls)

        fused = ls.fuse(Flaky()).cursor()
        assert payload(fused.advance()) == 1
        assert ls.is_done(fused.advance())
        assert ls.is_done(fused.advance())

    def test_fuse_of_restartable_seq_restarts(self):
        fused = ls.fuse(create.range(2))
        assert list(fused) == [0, 1, 2]
        assert list(fused) == [0, 1, 2]
