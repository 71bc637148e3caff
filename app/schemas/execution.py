"""Execution API schemas.

Wire format is camelCase (processInstanceId, processInstanceVariables, ...);
fields also accept their snake_case names.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.dtos.execution import (
    ExecutionView,
    FilterRequest,
    Page,
    VariableCriterion,
    VariableView,
)

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)

_FilterId = str | None


class QueryVariable(BaseModel):
    """Variable criterion in a query body.

    operation and value stay optional here; missing or unknown values are
    reported by the filter compiler as INVALID_FILTER (400).
    """

    model_config = _CAMEL

    name: str | None = None
    operation: str | None = None
    value: Any = None
    type: str | None = Field(
        default=None,
        description="Declared type: string, short, integer, long, double, boolean, date",
    )

    def to_criterion(self) -> VariableCriterion:
        return VariableCriterion(
            name=self.name, operation=self.operation, value=self.value, type=self.type
        )


class ExecutionQueryRequest(BaseModel):
    """Body for POST /query/executions."""

    model_config = _CAMEL

    id: _FilterId = Field(default=None, min_length=1)
    process_instance_id: _FilterId = Field(default=None, min_length=1)
    process_definition_key: _FilterId = Field(default=None, min_length=1)
    process_definition_id: _FilterId = Field(default=None, min_length=1)
    process_business_key: _FilterId = Field(default=None, min_length=1)
    activity_id: _FilterId = Field(default=None, min_length=1)
    parent_id: _FilterId = Field(default=None, min_length=1)
    message_event_subscription_name: _FilterId = Field(default=None, min_length=1)
    signal_event_subscription_name: _FilterId = Field(default=None, min_length=1)
    variables: list[QueryVariable] | None = None
    process_instance_variables: list[QueryVariable] | None = None

    def to_filter_request(self) -> FilterRequest:
        return FilterRequest(
            id=self.id,
            process_instance_id=self.process_instance_id,
            process_definition_key=self.process_definition_key,
            process_definition_id=self.process_definition_id,
            process_business_key=self.process_business_key,
            activity_id=self.activity_id,
            parent_id=self.parent_id,
            message_event_subscription_name=self.message_event_subscription_name,
            signal_event_subscription_name=self.signal_event_subscription_name,
            variables=tuple(v.to_criterion() for v in self.variables or ()),
            process_instance_variables=tuple(
                v.to_criterion() for v in self.process_instance_variables or ()
            ),
        )


class ExecutionResponse(BaseModel):
    """Execution response."""

    model_config = _CAMEL

    id: str
    parent_id: str | None
    process_instance_id: str
    process_definition_id: str
    process_definition_key: str
    business_key: str | None
    activity_id: str | None
    suspended: bool

    @classmethod
    def from_view(cls, view: ExecutionView) -> "ExecutionResponse":
        return cls(
            id=view.id,
            parent_id=view.parent_id,
            process_instance_id=view.process_instance_id,
            process_definition_id=view.process_definition_id,
            process_definition_key=view.process_definition_key,
            business_key=view.business_key,
            activity_id=view.activity_id,
            suspended=view.suspended,
        )


class ExecutionListResponse(BaseModel):
    """Paged execution list: data plus total, start, sort, order and size."""

    data: list[ExecutionResponse]
    total: int = Field(..., ge=0, description="Matches ignoring pagination")
    start: int = Field(..., ge=0)
    sort: str
    order: str
    size: int = Field(..., ge=1, description="Requested page size")

    @classmethod
    def from_page(
        cls, page: Page[ExecutionView], sort: str, order: str
    ) -> "ExecutionListResponse":
        return cls(
            data=[ExecutionResponse.from_view(v) for v in page.items],
            total=page.total,
            start=page.offset,
            sort=sort,
            order=order,
            size=page.size,
        )


class VariableRequest(BaseModel):
    """Single variable in PUT /executions/{id}/variables."""

    name: str | None = None
    type: str | None = None
    value: Any = None

    def to_criterion(self) -> VariableCriterion:
        return VariableCriterion(
            name=self.name, operation=None, value=self.value, type=self.type
        )


class VariableResponse(BaseModel):
    """Stored variable of an execution."""

    name: str
    type: str
    value: str | int | float | bool | datetime | None

    @classmethod
    def from_view(cls, view: VariableView) -> "VariableResponse":
        return cls(name=view.name, type=view.type, value=view.value)
