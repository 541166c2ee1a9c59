"""Descriptor types for aiohttp-stubgen.

This module provides:
- Immutable pydantic descriptors for the metadata handed over by the API
  description parser (operations, parameters, responses, models, servers)
- Frozen dataclasses for the metadata derived from them (handler parameters,
  success responses, handler names, annotated operations, rewritten models)

Descriptors accept both snake_case and camelCase keys so that metadata dumped
by other generators (``dataType``, ``baseType``, ``returnBaseType``...)
validates as-is.
"""

import dataclasses
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    'Parameter',
    'Response',
    'Operation',
    'OperationGroup',
    'Property',
    'Model',
    'ServerVariable',
    'Server',
    'Contact',
    'Info',
    'ApiDescription',
    'HandlerParameter',
    'SuccessResponse',
    'HandlerNames',
    'AnnotatedOperation',
    'AnnotatedOperationGroup',
    'RewrittenModel',
]


class Descriptor(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class Parameter(Descriptor):
    """A single operation parameter, in any location."""

    name: str
    data_type: str | None = None
    required: bool = False
    description: str | None = None


class Response(Descriptor):
    """A declared response: status-code string and associated type name."""

    code: str | None = None
    base_type: str | None = None
    description: str | None = None


class Operation(Descriptor):
    """A parsed operation, its parameters partitioned by location."""

    operation_id: str = ''
    http_method: str = 'GET'
    path: str = ''
    summary: str | None = None
    path_params: tuple[Parameter, ...] = ()
    query_params: tuple[Parameter, ...] = ()
    header_params: tuple[Parameter, ...] = ()
    cookie_params: tuple[Parameter, ...] = ()
    body_param: Parameter | None = None
    responses: tuple[Response, ...] = ()
    return_base_type: str | None = Field(
        None, description='Fallback return type of the operation.'
    )


class OperationGroup(Descriptor):
    """Operations sharing one handler interface (usually one tag)."""

    classname: str | None = None
    operations: tuple[Operation, ...] = ()
    imports: tuple[str, ...] = Field(
        (), description='Absolute import statements needed by the group.'
    )


class Property(Descriptor):
    name: str
    data_type: str | None = None
    datatype_with_enum: str | None = None
    base_type: str | None = None
    complex_type: str | None = None


class Model(Descriptor):
    classname: str
    vars: tuple[Property, ...] = ()
    imports: tuple[str, ...] = Field(
        (), description='Names of the other models this model depends on.'
    )


class ServerVariable(Descriptor):
    default: str | None = None
    enum: tuple[str, ...] = ()
    description: str | None = None


class Server(Descriptor):
    url: str | None = None
    description: str | None = None
    variables: dict[str, ServerVariable | None] = Field(default_factory=dict)


class Contact(Descriptor):
    name: str | None = None
    email: str | None = None
    url: str | None = None


class Info(Descriptor):
    title: str | None = None
    description: str | None = None
    version: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None


class ApiDescription(Descriptor):
    """Everything the generator consumes from the description parser."""

    info: Info | None = None
    servers: tuple[Server, ...] = ()
    operation_groups: tuple[OperationGroup, ...] = ()
    models: tuple[Model, ...] = ()


@dataclasses.dataclass(frozen=True)
class HandlerParameter:
    name: str
    python_type: str
    required: bool
    description: str = ''
    is_body: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Template-facing representation."""
        return {
            'paramName': self.name,
            'pythonType': self.python_type,
            'required': self.required,
            'description': self.description,
            'isBody': self.is_body,
        }


@dataclasses.dataclass(frozen=True)
class SuccessResponse:
    status_code: int = 200
    response_class: str | None = None


@dataclasses.dataclass(frozen=True)
class HandlerNames:
    """Names of the handler interface bound to one resource group.

    Attributes:
        class_name: The interface class, e.g. ``IPetHandler``.
        module: The module holding the interface, e.g. ``pet_handler``.
        attribute_name: The attribute the handler is bound to, e.g. ``pet``.
    """

    class_name: str
    module: str
    attribute_name: str

    def to_dict(self) -> dict[str, str]:
        return {
            'handlerClassName': self.class_name,
            'handlerModule': self.module,
            'handlerAttributeName': self.attribute_name,
        }


@dataclasses.dataclass(frozen=True)
class AnnotatedOperation:
    """An operation enriched with its handler contract."""

    operation: Operation
    handler_parameters: tuple[HandlerParameter, ...]
    success_status_code: int
    handler_result_type: str
    success_response_class: str | None = None
    handler_names: HandlerNames | None = None

    @property
    def vendor_extensions(self) -> dict[str, Any]:
        """The derived metadata under the keys the templates expect."""
        extensions: dict[str, Any] = {
            'x-handler-parameters': [p.to_dict() for p in self.handler_parameters],
            'x-success-status-code': self.success_status_code,
        }
        if self.success_response_class:
            extensions['x-success-response-class'] = self.success_response_class
        extensions['x-handler-result-type'] = self.handler_result_type
        return extensions


@dataclasses.dataclass(frozen=True)
class AnnotatedOperationGroup:
    group: OperationGroup
    operations: tuple[AnnotatedOperation, ...]
    imports: tuple[str, ...] = ()
    handler_names: HandlerNames | None = None


@dataclasses.dataclass(frozen=True)
class RewrittenModel:
    """A model whose self references are quoted, plus its relative imports."""

    model: Model
    py_imports: tuple[str, ...] = ()

    @property
    def classname(self) -> str:
        return self.model.classname
