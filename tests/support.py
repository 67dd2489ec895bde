from __future__ import annotations

import typing

from kungfu import Error, Ok

import lazyseq as ls


def payload(step: ls.Step[typing.Any]) -> typing.Any:
    """Item of a value step, or the trailing value of a terminal step."""
    match step:
        case Ok(item):
            return item
        case Error(stop):
            return stop.value


class Resurrecting:
    """Foreign cursor which signals Done once and then resumes."""

    def __init__(self) -> None:
        self.calls = 0

    def advance(self) -> ls.Step[int]:
        self.calls += 1
        if self.calls == 2:
            return ls.done()
        return ls.value(self.calls)


class CountingSeq(ls.Seq[typing.Any]):
    """Sequence recording how many cursors were requested."""

    def __init__(self, items: typing.Iterable[typing.Any]) -> None:
        self.items = items
        self.opened = 0

    def cursor(self) -> ls.Cursor[typing.Any]:
        self.opened += 1
        return ls.cursor_of(self.items)
