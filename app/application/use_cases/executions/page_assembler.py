"""Page assembler: whitelisted ordering, bounds and execution of a compiled query."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.application.dtos.execution import ExecutionView, Page, SortRequest
from app.domain.enums import ExecutionQueryProperty
from app.domain.exceptions import InvalidSortException

if TYPE_CHECKING:
    from app.application.interfaces.queries import ExecutionQuery

logger = logging.getLogger(__name__)

# Logical sort name (as sent by clients) -> orderable execution property
EXECUTION_SORT_PROPERTIES: Mapping[str, ExecutionQueryProperty] = MappingProxyType(
    {
        "processDefinitionId": ExecutionQueryProperty.PROCESS_DEFINITION_ID,
        "processDefinitionKey": ExecutionQueryProperty.PROCESS_DEFINITION_KEY,
        "processInstanceId": ExecutionQueryProperty.PROCESS_INSTANCE_ID,
    }
)


class PageAssembler:
    """Order, bound and run an execution query, producing a Page.

    sort_properties is the whitelist of sortable fields; anything else is
    rejected before the query is touched.
    """

    def __init__(
        self,
        sort_properties: Mapping[str, ExecutionQueryProperty] = EXECUTION_SORT_PROPERTIES,
    ) -> None:
        self.sort_properties = MappingProxyType(dict(sort_properties))

    def resolve_sort_property(self, field: str) -> ExecutionQueryProperty:
        """Return the orderable property for a logical sort name.

        Raises:
            InvalidSortException: If field is not whitelisted.
        """
        prop = self.sort_properties.get(field)
        if prop is None:
            raise InvalidSortException(
                f"Value for param 'sort' is not valid, '{field}' is not a valid property",
                allowed=sorted(self.sort_properties),
            )
        return prop

    async def assemble(
        self, query: ExecutionQuery, sort: SortRequest
    ) -> Page[ExecutionView]:
        """Apply sort and bounds to query, run it and return one page.

        total is the match count ignoring pagination; offset and size echo
        the request. Store errors propagate unchanged.
        """
        prop = self.resolve_sort_property(sort.field)
        query.order_by(prop, sort.direction)
        total = await query.count()
        items = await query.list_page(sort.offset, sort.limit)
        logger.debug(
            "Assembled execution page: %d of %d (offset=%d, size=%d, sort=%s %s)",
            len(items),
            total,
            sort.offset,
            sort.limit,
            sort.field,
            sort.direction.value,
        )
        return Page(items=items, total=total, offset=sort.offset, size=sort.limit)
