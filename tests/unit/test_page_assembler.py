"""Unit tests for PageAssembler (sort whitelist, ordering, bounds, totals)."""

import pytest

from app.application.dtos.execution import ExecutionView, SortRequest
from app.application.use_cases.executions import EXECUTION_SORT_PROPERTIES, PageAssembler
from app.domain.enums import ExecutionQueryProperty, SortDirection
from app.domain.exceptions import InvalidSortException


def _view(n: int) -> ExecutionView:
    return ExecutionView(
        id=f"e{n}",
        process_instance_id=f"p{n}",
        process_definition_id="invoice:1:4",
        process_definition_key="invoice",
    )


class FakeQuery:
    """Records order/list calls; returns a slice of a fixed result set."""

    def __init__(self, rows: list[ExecutionView]) -> None:
        self.rows = rows
        self.orders: list[tuple[ExecutionQueryProperty, SortDirection]] = []
        self.pages: list[tuple[int, int]] = []

    def order_by(self, prop, direction) -> "FakeQuery":
        self.orders.append((prop, direction))
        return self

    async def count(self) -> int:
        return len(self.rows)

    async def list_page(self, offset: int, limit: int) -> list[ExecutionView]:
        self.pages.append((offset, limit))
        return self.rows[offset : offset + limit]


class FailingQuery(FakeQuery):
    async def count(self) -> int:
        raise RuntimeError("store unavailable")


def test_sort_whitelist_contents() -> None:
    assert dict(EXECUTION_SORT_PROPERTIES) == {
        "processDefinitionId": ExecutionQueryProperty.PROCESS_DEFINITION_ID,
        "processDefinitionKey": ExecutionQueryProperty.PROCESS_DEFINITION_KEY,
        "processInstanceId": ExecutionQueryProperty.PROCESS_INSTANCE_ID,
    }


def test_resolve_sort_property_unknown_field() -> None:
    with pytest.raises(InvalidSortException, match="'businessKey' is not a valid property") as exc_info:
        PageAssembler().resolve_sort_property("businessKey")
    assert exc_info.value.error_code == "INVALID_SORT"
    assert exc_info.value.details["allowed"] == [
        "processDefinitionId",
        "processDefinitionKey",
        "processInstanceId",
    ]


def test_whitelist_is_per_instance() -> None:
    assembler = PageAssembler({"key": ExecutionQueryProperty.PROCESS_DEFINITION_KEY})
    assert assembler.resolve_sort_property("key") is ExecutionQueryProperty.PROCESS_DEFINITION_KEY
    with pytest.raises(InvalidSortException):
        assembler.resolve_sort_property("processInstanceId")


async def test_assemble_orders_counts_and_pages() -> None:
    query = FakeQuery([_view(n) for n in range(25)])
    page = await PageAssembler().assemble(
        query,
        SortRequest(
            field="processDefinitionKey",
            direction=SortDirection.DESC,
            offset=10,
            limit=10,
        ),
    )
    assert query.orders == [
        (ExecutionQueryProperty.PROCESS_DEFINITION_KEY, SortDirection.DESC)
    ]
    assert query.pages == [(10, 10)]
    assert page.total == 25
    assert [v.id for v in page.items] == [f"e{n}" for n in range(10, 20)]
    assert page.offset == 10
    assert page.size == 10


async def test_assemble_offset_past_end_returns_empty_page() -> None:
    query = FakeQuery([_view(n) for n in range(3)])
    page = await PageAssembler().assemble(
        query, SortRequest(field="processInstanceId", offset=50, limit=10)
    )
    assert page.items == []
    assert page.total == 3
    assert page.offset == 50


async def test_assemble_unknown_sort_touches_nothing() -> None:
    query = FakeQuery([_view(1)])
    with pytest.raises(InvalidSortException):
        await PageAssembler().assemble(query, SortRequest(field="id"))
    assert query.orders == []
    assert query.pages == []


async def test_assemble_propagates_store_errors() -> None:
    with pytest.raises(RuntimeError, match="store unavailable"):
        await PageAssembler().assemble(
            FailingQuery([]), SortRequest(field="processInstanceId")
        )
