from __future__ import annotations

import typing

import pytest

import lazyseq as ls


@pytest.fixture
def pulls() -> list[typing.Any]:
    return []


@pytest.fixture
def counted_naturals(pulls: list[typing.Any]) -> ls.Seq[int]:
    """Endless 0, 1, 2, ... recording every upstream pull into `pulls`."""
    return ls.lazy_observer(ls.create.increments(), pulls.append)
