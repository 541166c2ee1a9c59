"""Metadata derivation for aiohttp server stubs.

Main Components:
    - StubGenerator: Orchestrates one generation run
    - OperationAnnotator: Builds handler contracts for operations
    - ImportRewriter: Makes imports relative and quotes self references
    - resolve_layout: Computes the output directory tree
    - resolve_server_defaults: Derives port and context path from servers

Example:
    >>> from aiohttp_stubgen.codegen import StubGenerator
    >>> from aiohttp_stubgen.config import GeneratorOptions
    >>>
    >>> generator = StubGenerator(GeneratorOptions(package_name='petstore'))
    >>> generator.context.properties()['serverPort']
    '8080'
"""

from aiohttp_stubgen.codegen.description import DescriptionLoader, load_description
from aiohttp_stubgen.codegen.generator import (
    GenerationContext,
    GenerationResult,
    StubGenerator,
)
from aiohttp_stubgen.codegen.imports import ImportRewriter, quote_self_reference
from aiohttp_stubgen.codegen.layout import Layout, SupportingFile, resolve_layout
from aiohttp_stubgen.codegen.operations import (
    OperationAnnotator,
    build_handler_parameters,
    determine_success_response,
    handler_names,
)
from aiohttp_stubgen.codegen.servers import ServerDefaults, resolve_server_defaults
from aiohttp_stubgen.codegen.types import (
    AnnotatedOperation,
    AnnotatedOperationGroup,
    ApiDescription,
    HandlerNames,
    HandlerParameter,
    Model,
    Operation,
    OperationGroup,
    Parameter,
    Property,
    Response,
    RewrittenModel,
    Server,
    ServerVariable,
    SuccessResponse,
)
from aiohttp_stubgen.codegen.utils import (
    sanitize_context_path,
    sanitize_package_name,
    sanitize_port,
)

__all__ = [
    # Orchestration
    'StubGenerator',
    'GenerationContext',
    'GenerationResult',
    'DescriptionLoader',
    'load_description',
    # Sanitizing
    'sanitize_package_name',
    'sanitize_port',
    'sanitize_context_path',
    # Servers and layout
    'ServerDefaults',
    'resolve_server_defaults',
    'Layout',
    'SupportingFile',
    'resolve_layout',
    # Imports
    'ImportRewriter',
    'quote_self_reference',
    # Operations
    'OperationAnnotator',
    'build_handler_parameters',
    'determine_success_response',
    'handler_names',
    # Descriptors
    'ApiDescription',
    'Operation',
    'OperationGroup',
    'Parameter',
    'Response',
    'Model',
    'Property',
    'Server',
    'ServerVariable',
    'AnnotatedOperation',
    'AnnotatedOperationGroup',
    'HandlerNames',
    'HandlerParameter',
    'RewrittenModel',
    'SuccessResponse',
]
