"""Operation annotation: the handler contract of each operation.

For every operation this derives the ordered handler parameter list, the
success response (status code and type) and the handler result type, and for
every resource group the names of its handler interface. Malformed or missing
values degrade to defaults; nothing here raises.
"""

import logging
from collections.abc import Iterable

from aiohttp_stubgen.codegen.imports import ImportRewriter
from aiohttp_stubgen.codegen.types import (
    AnnotatedOperation,
    AnnotatedOperationGroup,
    HandlerNames,
    HandlerParameter,
    Operation,
    OperationGroup,
    Parameter,
    SuccessResponse,
)
from aiohttp_stubgen.codegen.utils import underscore

__all__ = [
    'ANY_TYPE',
    'DEFAULT_STATUS_CODE',
    'JSON_PAYLOAD_TYPE',
    'OperationAnnotator',
    'annotate_parameter_type',
    'build_handler_parameters',
    'determine_success_response',
    'handler_names',
    'parse_status_code',
    'resolve_handler_result_type',
]

logger = logging.getLogger(__name__)

ANY_TYPE = 'Any'
JSON_PAYLOAD_TYPE = 'JSONPayload'
DEFAULT_STATUS_CODE = 200


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def annotate_parameter_type(parameter: Parameter) -> str:
    """The annotation exposed to handlers; optional unless required."""
    type_ = parameter.data_type if not _is_blank(parameter.data_type) else ANY_TYPE
    if parameter.required:
        return type_
    return f'{type_} | None'


def _to_handler_parameter(parameter: Parameter, is_body: bool = False) -> HandlerParameter:
    return HandlerParameter(
        name=parameter.name,
        python_type=annotate_parameter_type(parameter),
        required=parameter.required,
        description=parameter.description or '',
        is_body=is_body,
    )


def build_handler_parameters(operation: Operation) -> tuple[HandlerParameter, ...]:
    """Handler parameters: path, query, header, cookie, then the body."""
    params = [
        _to_handler_parameter(p)
        for group in (
            operation.path_params,
            operation.query_params,
            operation.header_params,
            operation.cookie_params,
        )
        for p in group
    ]
    if operation.body_param is not None:
        params.append(_to_handler_parameter(operation.body_param, is_body=True))
    return tuple(params)


def parse_status_code(code: str | None) -> int:
    try:
        return int(code.strip())
    except (AttributeError, ValueError):
        logger.debug(f'Malformed status code {code!r}, using {DEFAULT_STATUS_CODE}')
        return DEFAULT_STATUS_CODE


def determine_success_response(operation: Operation) -> SuccessResponse:
    """Pick the success response of an operation.

    The first declared response whose code starts with ``2`` wins, in
    declaration order rather than numeric order. Its type falls back to the
    operation's return type. Without a 2xx response the operation's return
    type is used with status 200.
    """
    fallback = operation.return_base_type if not _is_blank(operation.return_base_type) else None

    for response in operation.responses:
        if response is None or _is_blank(response.code):
            continue
        if not response.code.strip().startswith('2'):
            continue
        response_class = response.base_type if not _is_blank(response.base_type) else fallback
        return SuccessResponse(parse_status_code(response.code), response_class)

    return SuccessResponse(DEFAULT_STATUS_CODE, fallback)


def resolve_handler_result_type(success: SuccessResponse | None) -> str:
    if success is not None and not _is_blank(success.response_class):
        return success.response_class
    return JSON_PAYLOAD_TYPE


def handler_names(classname: str | None) -> HandlerNames | None:
    """Handler interface names for a resource group, None for a blank name.

    Example:
        >>> handler_names('PetStore')
        HandlerNames(class_name='IPetStoreHandler', module='pet_store_handler', attribute_name='pet_store')
    """
    if _is_blank(classname):
        return None
    snake = underscore(classname)
    return HandlerNames(
        class_name=f'I{classname}Handler',
        module=f'{snake}_handler',
        attribute_name=snake,
    )


class OperationAnnotator:
    """Builds the handler contract metadata of operations and groups.

    Example:
        >>> annotator = OperationAnnotator(ImportRewriter('shop'))
        >>> annotated = annotator.annotate_group(group)
        >>> annotated.handler_names.class_name
        'IPetHandler'
    """

    def __init__(self, rewriter: ImportRewriter | None = None):
        self.rewriter = rewriter

    def annotate(
        self, operation: Operation, names: HandlerNames | None = None
    ) -> AnnotatedOperation:
        """Annotate a single operation; the operation itself is not modified."""
        success = determine_success_response(operation)
        result_type = resolve_handler_result_type(success)
        if result_type == JSON_PAYLOAD_TYPE:
            logger.debug(
                f'No response type for operation {operation.operation_id!r}, '
                f'using {JSON_PAYLOAD_TYPE}'
            )
        return AnnotatedOperation(
            operation=operation,
            handler_parameters=build_handler_parameters(operation),
            success_status_code=success.status_code,
            handler_result_type=result_type,
            success_response_class=success.response_class,
            handler_names=names,
        )

    def annotate_operations(
        self, operations: Iterable[Operation], names: HandlerNames | None = None
    ) -> tuple[AnnotatedOperation, ...]:
        return tuple(self.annotate(op, names) for op in operations if op is not None)

    def annotate_group(self, group: OperationGroup) -> AnnotatedOperationGroup:
        """Annotate every operation of a resource group.

        The handler names are attached both to the group and to each
        operation. Group imports are made relative when a rewriter is set.
        """
        names = handler_names(group.classname)
        imports = group.imports
        if self.rewriter is not None:
            imports = self.rewriter.rewrite_imports(imports)
        return AnnotatedOperationGroup(
            group=group,
            operations=self.annotate_operations(group.operations, names),
            imports=tuple(imports),
            handler_names=names,
        )
