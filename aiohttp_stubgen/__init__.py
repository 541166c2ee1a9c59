"""aiohttp-stubgen - Derive aiohttp server-stub metadata from API descriptions.

aiohttp-stubgen takes the metadata produced by an API description parser
(operations grouped by resource, models, servers, info) and derives what a
template renderer needs to emit an aiohttp server stub: handler contracts per
operation, relative imports per model, the package layout and a flat
property set.

Quick Start:
    >>> from aiohttp_stubgen import GeneratorOptions, StubGenerator
    >>>
    >>> options = GeneratorOptions(package_name='petstore', output_folder='./out')
    >>> result = StubGenerator(options, description).generate()
    >>> result.context.layout.controllers_dir
    'petstore/controllers'

CLI Usage:
    $ aiohttp-stubgen properties --config aiohttp-stubgen.yaml
    $ aiohttp-stubgen layout
"""

from aiohttp_stubgen.codegen.generator import StubGenerator
from aiohttp_stubgen.codegen.imports import ImportRewriter
from aiohttp_stubgen.codegen.layout import resolve_layout
from aiohttp_stubgen.codegen.operations import OperationAnnotator
from aiohttp_stubgen.codegen.servers import resolve_server_defaults
from aiohttp_stubgen.codegen.types import ApiDescription
from aiohttp_stubgen.config import GeneratorOptions, get_config
from aiohttp_stubgen.exceptions import (
    ConfigurationError,
    DescriptionLoadError,
    StubgenError,
)

__all__ = [
    # Main classes
    'StubGenerator',
    'OperationAnnotator',
    'ImportRewriter',
    'ApiDescription',
    'resolve_layout',
    'resolve_server_defaults',
    # Configuration
    'GeneratorOptions',
    'get_config',
    # Exceptions
    'StubgenError',
    'ConfigurationError',
    'DescriptionLoadError',
]

try:
    from importlib.metadata import version as _version

    __version__ = _version('aiohttp-stubgen')
except ImportError:
    __version__ = 'unknown'
