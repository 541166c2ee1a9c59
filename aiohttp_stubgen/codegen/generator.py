"""Orchestration of one generation run.

StubGenerator resolves the run-wide context once (package names, version,
layout, server defaults, informational metadata and the flat property set for
template interpolation), then feeds each operation group through the
OperationAnnotator and each model through the ImportRewriter.
"""

import dataclasses
import logging
from collections.abc import Iterable
from pathlib import PurePath
from typing import Any

from aiohttp_stubgen.codegen.imports import ImportRewriter
from aiohttp_stubgen.codegen.layout import Layout, resolve_layout
from aiohttp_stubgen.codegen.operations import OperationAnnotator
from aiohttp_stubgen.codegen.servers import ServerDefaults, resolve_server_defaults
from aiohttp_stubgen.codegen.types import (
    AnnotatedOperationGroup,
    ApiDescription,
    Info,
    Model,
    OperationGroup,
    RewrittenModel,
)
from aiohttp_stubgen.codegen.utils import capitalize, sanitize_package_name
from aiohttp_stubgen.config import GeneratorOptions

__all__ = ['GenerationContext', 'GenerationResult', 'StubGenerator']

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_VERSION = '1.0.0'
DEFAULT_INFO_EMAIL = 'support@example.com'
DEFAULT_PACKAGE_URL = 'https://example.com'


def _first(*values: str | None) -> str | None:
    for value in values:
        if value is not None and value.strip():
            return value.strip()
    return None


@dataclasses.dataclass(frozen=True)
class GenerationContext:
    """Run-wide values, resolved once and read-only afterwards."""

    package_name: str
    package_version: str
    api_package: str
    model_package: str
    handler_package: str
    layout: Layout
    server: ServerDefaults
    app_name: str
    app_description: str
    info_email: str
    package_url: str
    feature_cors: bool
    generator_language_version: str

    def properties(self) -> dict[str, Any]:
        """Flat property set for direct template interpolation."""
        return {
            'packageName': self.package_name,
            'projectName': self.package_name,
            'invokerPackage': self.package_name,
            'packageVersion': self.package_version,
            'apiPackage': self.api_package,
            'modelPackage': self.model_package,
            'handlerPackage': self.handler_package,
            'pythonSrcRoot': self.layout.source_root,
            'sourceFolder': self.layout.source_root,
            'testsRoot': self.layout.tests_root,
            'serverPort': self.server.port,
            'contextPath': self.server.context_path,
            'featureCORS': self.feature_cors,
            'generatorLanguageVersion': self.generator_language_version,
            'appName': self.app_name,
            'appDescription': self.app_description,
            'infoEmail': self.info_email,
            'packageUrl': self.package_url,
        }


@dataclasses.dataclass(frozen=True)
class GenerationResult:
    context: GenerationContext
    operation_groups: tuple[AnnotatedOperationGroup, ...]
    models: tuple[RewrittenModel, ...]


class StubGenerator:
    """Derives all metadata needed to render an aiohttp server stub.

    Example:
        >>> from aiohttp_stubgen.config import GeneratorOptions
        >>> generator = StubGenerator(GeneratorOptions(package_name='shop'), description)
        >>> result = generator.generate()
        >>> result.context.layout.schemas_dir
        'shop/schemas'
    """

    def __init__(
        self, options: GeneratorOptions, description: ApiDescription | None = None
    ):
        self.options = options
        self.description = description or ApiDescription()
        self._context: GenerationContext | None = None
        self._rewriter: ImportRewriter | None = None

    @property
    def context(self) -> GenerationContext:
        if self._context is None:
            self._context = self.process_options()
        return self._context

    @property
    def rewriter(self) -> ImportRewriter:
        if self._rewriter is None:
            self._rewriter = ImportRewriter(
                self.context.package_name, self.context.model_package
            )
        return self._rewriter

    def _resolve_package_name(self) -> str:
        output_dir_name = PurePath(self.options.output_folder).name
        return sanitize_package_name(self.options.package_name, output_dir_name)

    def _resolve_package_version(self) -> str:
        info = self.description.info
        return _first(
            self.options.package_version,
            info.version if info else None,
            DEFAULT_PACKAGE_VERSION,
        )

    def _resolve_info_defaults(self, package_name: str) -> dict[str, str]:
        info = self.description.info or Info()
        contact = info.contact

        app_name = _first(
            self.options.app_name,
            info.title,
            capitalize(package_name.replace('_', ' ')),
        )
        app_description = _first(
            self.options.app_description,
            info.description,
            f'{app_name} server stub generated by OpenAPI Generator.',
        )
        info_email = _first(
            self.options.info_email,
            contact.email if contact else None,
            DEFAULT_INFO_EMAIL,
        )
        package_url = _first(
            self.options.package_url,
            contact.url if contact else None,
            info.terms_of_service,
            DEFAULT_PACKAGE_URL,
        )
        return {
            'app_name': app_name,
            'app_description': app_description,
            'info_email': info_email,
            'package_url': package_url,
        }

    def process_options(self) -> GenerationContext:
        """Resolve every run-wide value from options and description."""
        package_name = self._resolve_package_name()
        api_package = _first(self.options.api_package, f'{package_name}.controllers')
        model_package = _first(self.options.model_package, f'{package_name}.schemas')
        handler_package = _first(self.options.handler_package, f'{package_name}.handlers')

        server = resolve_server_defaults(
            self.description.servers,
            explicit_port=self.options.server_port,
            explicit_context_path=self.options.context_path,
        )

        layout = resolve_layout(
            package_name,
            self.options.output_folder,
            source_root=self.options.python_src_root,
            tests_root=self.options.tests_root,
            handler_package=handler_package,
        )
        logger.debug(
            f'Resolved layout for {package_name!r}: package root '
            f'{layout.package_root_dir!r} (flatten={layout.flatten})'
        )

        return GenerationContext(
            package_name=package_name,
            package_version=self._resolve_package_version(),
            api_package=api_package,
            model_package=model_package,
            handler_package=handler_package,
            layout=layout,
            server=server,
            feature_cors=self.options.feature_cors,
            generator_language_version=self.options.generator_language_version,
            **self._resolve_info_defaults(package_name),
        )

    def process_operations(self, group: OperationGroup) -> AnnotatedOperationGroup:
        return OperationAnnotator(self.rewriter).annotate_group(group)

    def process_models(self, models: Iterable[Model]) -> tuple[RewrittenModel, ...]:
        return tuple(self.rewriter.rewrite_model(model) for model in models)

    def generate(self) -> GenerationResult:
        """Derive the metadata of every group and model in the description."""
        groups = tuple(
            self.process_operations(group)
            for group in self.description.operation_groups
        )
        models = self.process_models(self.description.models)
        logger.info(
            f'Prepared {len(groups)} operation groups and {len(models)} models '
            f'for package {self.context.package_name!r}'
        )
        return GenerationResult(
            context=self.context, operation_groups=groups, models=models
        )
