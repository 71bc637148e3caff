"""Execution API: thin routes delegating to ExecutionQueryService.

router serves /executions (list with scalar filters, get, set variables);
query_router serves /query/executions (body with variable criteria).
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query

from app.api.v1.dependencies import (
    get_execution_service,
    get_execution_service_for_write,
)
from app.application.dtos.execution import FilterRequest, SortRequest
from app.application.use_cases.executions import (
    ExecutionQueryService,
    build_sort_request,
)
from app.core.config import get_settings
from app.schemas.execution import (
    ExecutionListResponse,
    ExecutionQueryRequest,
    ExecutionResponse,
    VariableRequest,
    VariableResponse,
)

router = APIRouter()
query_router = APIRouter()


def get_sort_request(
    sort: str | None = Query(None, description="processDefinitionId | processDefinitionKey | processInstanceId"),
    order: str | None = Query(None, description="asc | desc"),
    start: int = Query(0, ge=0),
    size: int | None = Query(None, ge=1),
) -> SortRequest:
    """Pagination params -> SortRequest. size defaults to and is capped by settings."""
    settings = get_settings()
    page_size = min(size or settings.default_page_size, settings.max_page_size)
    return build_sort_request(
        sort=sort,
        order=order,
        start=start,
        size=page_size,
        default_sort=settings.default_sort_field,
    )


@router.get("", response_model=ExecutionListResponse)
async def list_executions(
    svc: Annotated[ExecutionQueryService, Depends(get_execution_service)],
    sort_request: Annotated[SortRequest, Depends(get_sort_request)],
    id: str | None = Query(None, min_length=1),
    process_instance_id: str | None = Query(None, alias="processInstanceId", min_length=1),
    process_definition_key: str | None = Query(
        None, alias="processDefinitionKey", min_length=1
    ),
    process_definition_id: str | None = Query(
        None, alias="processDefinitionId", min_length=1
    ),
    process_business_key: str | None = Query(
        None, alias="processBusinessKey", min_length=1
    ),
    activity_id: str | None = Query(None, alias="activityId", min_length=1),
    parent_id: str | None = Query(None, alias="parentId", min_length=1),
    message_event_subscription_name: str | None = Query(
        None, alias="messageEventSubscriptionName", min_length=1
    ),
    signal_event_subscription_name: str | None = Query(
        None, alias="signalEventSubscriptionName", min_length=1
    ),
):
    """List executions filtered by scalar fields, sorted and paged."""
    request = FilterRequest(
        id=id,
        process_instance_id=process_instance_id,
        process_definition_key=process_definition_key,
        process_definition_id=process_definition_id,
        process_business_key=process_business_key,
        activity_id=activity_id,
        parent_id=parent_id,
        message_event_subscription_name=message_event_subscription_name,
        signal_event_subscription_name=signal_event_subscription_name,
    )
    page = await svc.query_executions(request, sort_request)
    return ExecutionListResponse.from_page(
        page, sort=sort_request.field, order=sort_request.direction.value
    )


@router.get("/{execution_id}", response_model=ExecutionResponse)
async def get_execution(
    execution_id: str,
    svc: Annotated[ExecutionQueryService, Depends(get_execution_service)],
):
    """Get execution by id."""
    return ExecutionResponse.from_view(await svc.get_execution(execution_id))


@router.put("/{execution_id}/variables", response_model=list[VariableResponse])
async def set_execution_variables(
    execution_id: str,
    svc: Annotated[ExecutionQueryService, Depends(get_execution_service_for_write)],
    body: list[VariableRequest] = Body(..., min_length=1),
):
    """Create or replace variables on an execution; returns all its variables."""
    variables = await svc.set_variables(
        execution_id, [v.to_criterion() for v in body]
    )
    return [VariableResponse.from_view(v) for v in variables]


@query_router.post("", response_model=ExecutionListResponse)
async def query_executions(
    body: ExecutionQueryRequest,
    svc: Annotated[ExecutionQueryService, Depends(get_execution_service)],
    sort_request: Annotated[SortRequest, Depends(get_sort_request)],
):
    """Query executions by scalar fields and variable criteria (execution and process-instance scope)."""
    page = await svc.query_executions(body.to_filter_request(), sort_request)
    return ExecutionListResponse.from_page(
        page, sort=sort_request.field, order=sort_request.direction.value
    )
