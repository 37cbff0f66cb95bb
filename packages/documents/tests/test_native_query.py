"""Tests for NativeQuery and the shared assemble() seam."""

from __future__ import annotations

import pytest

from cloudgate_core import InvalidArgumentError, IQueryAdapter
from cloudgate_documents import ClauseQuery, NativeQuery


def test_assemble_returns_statement_unchanged():
    statement = "select * from `people` where age > '18'"
    assert NativeQuery(statement).assemble() is statement


def test_statement_can_be_any_object():
    native = {"PartitionKey": "eq 'tenant'"}
    assert NativeQuery(native).statement == native


def test_statement_is_required():
    with pytest.raises(InvalidArgumentError):
        NativeQuery(None)


def test_both_query_types_share_the_contract():
    def run(query: IQueryAdapter):
        return query.assemble()

    queries = [ClauseQuery().from_("people"), NativeQuery("select * from people")]
    assert all(isinstance(q, IQueryAdapter) for q in queries)
    assert [run(q) for q in queries] == [
        (("from", "people"),),
        "select * from people",
    ]
