"""Tests for the capability protocols."""

from __future__ import annotations

from cloudgate_core.ports import ICountable, IIndexed, IQueryAdapter, ISequential


class StaticQuery:
    def assemble(self) -> str:
        return "SELECT * FROM t"


class Sized:
    def count(self) -> int:
        return 0


def test_query_adapter_is_structural():
    assert isinstance(StaticQuery(), IQueryAdapter)
    assert not isinstance(object(), IQueryAdapter)


def test_capabilities_are_independent():
    sized = Sized()
    assert isinstance(sized, ICountable)
    assert not isinstance(sized, IIndexed)
    assert not isinstance(sized, ISequential)
