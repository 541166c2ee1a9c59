import os
from pathlib import Path
from typing import Any, get_args

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aiohttp_stubgen.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['aiohttp-stubgen.yaml', 'aiohttp-stubgen.yml']
PYPROJECT_TOOL_KEY = 'aiohttp-stubgen'


class GeneratorOptions(BaseSettings):
    """User-facing options of a generation run.

    Every option can also be set through an ``AIOHTTP_STUBGEN_`` prefixed
    environment variable. Blank strings count as unset and fall back to the
    option's default.
    """

    model_config = SettingsConfigDict(
        env_prefix='AIOHTTP_STUBGEN_', protected_namespaces=()
    )

    description: str | None = Field(
        None, description='Path or URL to the parsed API description metadata.'
    )

    output_folder: str = Field(
        'generated-code/aiohttp-openapi-codegen',
        description='Output directory for the generated project.',
    )

    package_name: str = Field('aiohttp_server', description='Root python package name.')

    package_version: str | None = Field(
        None, description='Package version, defaults to the API version.'
    )

    python_src_root: str = Field(
        '', description='Relative path where generated python sources will be placed.'
    )

    tests_root: str = Field(
        'tests', description='Relative path where generated tests will be written.'
    )

    api_package: str | None = Field(
        None, description='Package of the controllers, defaults to <package>.controllers.'
    )

    model_package: str | None = Field(
        None, description='Package of the schemas, defaults to <package>.schemas.'
    )

    handler_package: str | None = Field(
        None, description='Package of the handler interfaces, defaults to <package>.handlers.'
    )

    server_port: str | None = Field(
        None, description='Port exposed by the generated aiohttp server.'
    )

    context_path: str | None = Field(
        None, description='Context path prefix for the aiohttp routes.'
    )

    feature_cors: bool = Field(False, description='Enable aiohttp_cors integration.')

    generator_language_version: str = Field(
        '3.11', description='Python version documented in README/metadata.'
    )

    app_name: str | None = Field(None, description='Human readable application name.')

    app_description: str | None = Field(
        None, description='Application description used in README/setup metadata.'
    )

    info_email: str | None = Field(
        None, description='Contact email exposed in the setup metadata.'
    )

    package_url: str | None = Field(
        None, description='Project URL used in the setup metadata.'
    )

    @field_validator('*', mode='before')
    @classmethod
    def _blank_means_default(cls, value: Any, info) -> Any:
        field = cls.model_fields[info.field_name]
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            # YAML reads unquoted versions and ports as numbers
            if str in (get_args(field.annotation) or (field.annotation,)):
                return str(value)
        if isinstance(value, str):
            if not value.strip():
                return field.default
            return value.strip()
        return value


def load_yaml(path: str | Path) -> dict:
    try:
        return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f'Malformed configuration: {e}', config_path=str(path)
        ) from e


def _validate(data: Any, config_path: str | Path) -> GeneratorOptions:
    try:
        return GeneratorOptions.model_validate(data or {})
    except ValidationError as e:
        field = '.'.join(str(loc) for loc in e.errors()[0]['loc']) if e.errors() else None
        raise ConfigurationError(
            'Invalid configuration', config_path=str(config_path), field=field
        ) from e


def get_config(path: str | None = None) -> GeneratorOptions:
    """Load options from a file, the working directory or pyproject.toml.

    Raises:
        ConfigurationError: If no configuration is found or it is invalid.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _validate(load_yaml(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _validate(load_yaml(candidate), candidate)

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(candidate.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f'Malformed pyproject.toml: {e}', config_path=str(candidate)
            ) from e
        tools = pyproject.get('tool', {})

        if PYPROJECT_TOOL_KEY in tools:
            return _validate(tools[PYPROJECT_TOOL_KEY], candidate)

    raise ConfigurationError('config not found')
