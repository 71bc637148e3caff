"""Application services: variable value resolution."""

from app.application.services.variable_value_resolver import VariableValueResolver

__all__ = ["VariableValueResolver"]
