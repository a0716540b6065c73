"""Schema plumbing shared by both GraphQL schemas."""
import dataclasses
from typing import Any, Optional

import strawberry
from graphql import GraphQLError
from graphql.validation import NoSchemaIntrospectionCustomRule
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from strawberry.extensions import AddValidationRules, SchemaExtension
from strawberry.types import ExecutionContext

from catalog_service.core.exceptions import AppException, ValidationError
from catalog_service.core.logging import get_logger

logger = get_logger("graphql")


class ErrorCodeExtension(SchemaExtension):
    """Expose the ``error_code`` of domain errors as ``extensions.code``."""

    def on_operation(self):
        yield
        errors = getattr(self.execution_context.result, "errors", None)
        for error in errors or []:
            original = error.original_error
            if isinstance(original, AppException) and original.error_code:
                error.extensions = {**(error.extensions or {}), "code": original.error_code}


class CatalogSchema(strawberry.Schema):
    """Schema that keeps expected domain errors out of the error log."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, AppException):
                logger.info("%s at %s: %s", error.original_error.error_code, error.path, error.message)
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


class DisableIntrospection(AddValidationRules):
    def __init__(self) -> None:
        super().__init__([NoSchemaIntrospectionCustomRule])


def build_schema(query: type, mutation: type, introspection: bool = True) -> CatalogSchema:
    extensions: list[Any] = [ErrorCodeExtension]
    if not introspection:
        extensions.append(DisableIntrospection)
    return CatalogSchema(query=query, mutation=mutation, extensions=extensions)


def provided(**fields: Any) -> dict[str, Any]:
    """Keep only the arguments the client actually sent."""
    return {key: value for key, value in fields.items() if value is not strawberry.UNSET}


def input_fields(obj: Any) -> dict[str, Any]:
    """Fields of a Strawberry input object that the client actually sent."""
    return provided(**{f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)})


def create_fields(obj: Any) -> dict[str, Any]:
    # An explicit null on an optional create field means "use the default"
    return {key: value for key, value in input_fields(obj).items() if value is not None}


def validated(schema_cls: type[BaseModel], data: dict[str, Any]) -> BaseModel:
    """Build a store input, turning pydantic failures into ``ValidationError``."""
    try:
        return schema_cls(**data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ValidationError(f"Invalid {field}: {first['msg']}", field=field) from exc
