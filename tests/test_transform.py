import pytest

import lazyseq as ls
from lazyseq import create


def odd(n):
    return n % 2 == 1


class TestMap:
    """map and flat_map"""

    def test_map_passes_index_and_source(self):
        source = [10, 20]
        mapped = ls.map(source, lambda item, index, seq: (item, index, seq is source))
        assert list(mapped) == [(10, 0, True), (20, 1, True)]

    def test_map_accepts_unary_callbacks(self):
        assert list(ls.map(["a", "b"], str.upper)) == ["A", "B"]
        assert list(ls.map([1, 2], lambda x: x * 2)) == [2, 4]

    def test_map_is_lazy(self):
        calls = []

        def track(x):
            calls.append(x)
            return x * 2

        mapped = ls.map(create.increments(), track)
        assert calls == []
        assert list(ls.take(mapped, 2)) == [0, 2]
        assert calls == [0, 1]

    def test_identity_map_clones(self):
        items = list(range(10))
        assert list(ls.map(items, lambda x: x)) == items

    def test_flat_map_splices_one_level(self):
        assert list(ls.flat_map([1, 2], lambda x: [x, x * 10])) == [1, 10, 2, 20]
        assert list(ls.flat_map([1, 2], lambda x: [[x]])) == [[1], [2]]

    def test_flat_map_yields_scalars(self):
        assert list(ls.flat_map([1, 2], lambda x: x + 1)) == [2, 3]

    def test_flat_map_does_not_split_strings(self):
        assert list(ls.flat_map([1, 2], lambda x: "ab")) == ["ab", "ab"]

    def test_flat_map_splices_sequences(self):
        assert list(ls.flat_map([1, 2], lambda x: create.range(x))) == [0, 1, 0, 1, 2]


class TestTake:
    """take"""

    @pytest.mark.parametrize("n", range(11))
    def test_take_is_idempotent(self, n):
        items = list(range(10))
        once = list(ls.take(items, n))
        assert once == items[:n]
        assert list(ls.take(ls.take(items, n), n)) == once

    def test_take_from_iterator(self):
        items = list(range(10))
        assert list(ls.take(iter(items), 5)) == items[:5]

    def test_take_from_endless(self):
        assert list(ls.take(create.constant("x"), 3)) == ["x", "x", "x"]

    def test_take_zero_pulls_nothing(self, counted_naturals, pulls):
        assert list(ls.take(counted_naturals, 0)) == []
        assert pulls == []

    def test_take_pulls_exactly_n(self, counted_naturals, pulls):
        list(ls.take(counted_naturals, 3))
        assert pulls == [0, 1, 2]

    def test_take_past_end_pads_with_none(self):
        # Exhausted upstream yields None for the remaining positions
        # instead of ending early. Kept as is: see DESIGN.md.
        assert list(ls.take([1, 2], 4)) == [1, 2, None, None]


class TestDrop:
    """drop"""

    def test_drop(self):
        assert list(ls.drop(create.range(9), 3)) == [3, 4, 5, 6, 7, 8, 9]

    def test_drop_past_end(self):
        assert list(ls.drop([1, 2], 5)) == []

    def test_drop_zero(self):
        assert list(ls.drop([1, 2], 0)) == [1, 2]

    def test_drop_waits_for_first_pull(self, counted_naturals, pulls):
        dropped = ls.drop(counted_naturals, 2)
        assert pulls == []
        assert list(ls.take(dropped, 1)) == [2]
        assert pulls == [0, 1, 2]


class TestUntil:
    """until and drop_until"""

    def test_until_includes_boundary(self):
        assert list(ls.until([1, 2, 3, 4, 5], lambda x: x == 3)) == [1, 2, 3]

    def test_until_excludes_boundary(self):
        assert list(ls.until([1, 2, 3, 4, 5], lambda x: x == 3, include_last=False)) == [1, 2]

    def test_until_without_match(self):
        assert list(ls.until([1, 2], lambda x: x > 5)) == [1, 2]

    def test_until_on_endless(self):
        assert list(ls.until(create.increments(), lambda x: x >= 4)) == [0, 1, 2, 3, 4]

    def test_until_stops_pulling_at_boundary(self, counted_naturals, pulls):
        list(ls.until(counted_naturals, lambda x: x == 2))
        assert pulls == [0, 1, 2]

    def test_until_predicate_gets_index(self):
        assert list(ls.until("abcd", lambda _, index: index == 1)) == ["a", "b"]

    def test_drop_until_includes_boundary(self):
        assert list(ls.drop_until([1, 2, 3, 4, 5], lambda x: x == 3)) == [3, 4, 5]

    def test_drop_until_excludes_boundary(self):
        assert list(ls.drop_until([1, 2, 3, 4, 5], lambda x: x == 3, include_first=False)) == [4, 5]

    def test_drop_until_without_match(self):
        assert list(ls.drop_until([1, 2], lambda x: x > 5)) == []

    def test_drop_until_checks_predicate_only_until_match(self):
        seen = []

        def predicate(x):
            seen.append(x)
            return x == 2

        assert list(ls.drop_until([1, 2, 3, 1], predicate)) == [2, 3, 1]
        assert seen == [1, 2]


class TestFilter:
    """filter and indexed_pairs"""

    def test_odd_naturals(self):
        assert list(ls.take(ls.filter(create.increments(1), odd), 5)) == [1, 3, 5, 7, 9]

    def test_filter_index_is_upstream_position(self):
        assert list(ls.filter([5, 6, 7, 8], lambda _, index: index % 2 == 0)) == [5, 7]

    def test_filter_nothing(self):
        assert list(ls.filter([1, 3], lambda x: x % 2 == 0)) == []

    def test_indexed_pairs(self):
        assert list(ls.indexed_pairs("ab")) == [(0, "a"), (1, "b")]

    def test_indexed_pairs_on_endless(self):
        pairs = list(ls.take(ls.indexed_pairs(create.constant("z")), 2))
        assert pairs == [(0, "z"), (1, "z")]


class TestChunkify:
    """chunkify"""

    def test_even_chunks(self):
        chunks = list(ls.chunkify([0, 1, 2, 3, 4, 5, 6, 7, 8, 9], 2))
        assert chunks == [[0, 1], [2, 3], [4, 5], [6, 7], [8, 9]]

    def test_short_last_chunk(self):
        chunks = list(ls.chunkify(list(range(10)), 3))
        assert chunks == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]

    def test_general_source_is_buffered(self):
        chunks = list(ls.chunkify(create.range(9), 4))
        assert chunks == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9]]

    def test_tuple_chunks_are_lists(self):
        assert list(ls.chunkify((1, 2, 3), 2)) == [[1, 2], [3]]

    @pytest.mark.parametrize("size", range(1, 13))
    def test_chunks_reconstruct_source(self, size):
        items = list(range(10))
        for source in (items, create.range(9), iter(items)):
            chunks = list(ls.chunkify(source, size))
            assert [item for chunk in chunks for item in chunk] == items
            assert all(len(chunk) == size for chunk in chunks[:-1])

    def test_endless_source(self):
        first = list(ls.take(ls.chunkify(create.increments(), 3), 2))
        assert first == [[0, 1, 2], [3, 4, 5]]

    def test_empty_source(self):
        assert list(ls.chunkify([], 3)) == []
        assert list(ls.chunkify(iter([]), 3)) == []

    @pytest.mark.parametrize("size", [0, -1, 1.5, "2", None, True])
    def test_invalid_size_rejected_at_call_time(self, size):
        with pytest.raises(ls.ChunkSizeError) as exc_info:
            ls.chunkify([0, 1, 2, 3, 4, 5, 6, 7, 8, 9], size)
        assert exc_info.value.size == size
        assert isinstance(exc_info.value, ls.RangeValidationError)
        assert isinstance(exc_info.value, ValueError)

    def test_integral_float_size_accepted(self):
        assert list(ls.chunkify([1, 2, 3], 2.0)) == [[1, 2], [3]]
