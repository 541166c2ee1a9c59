from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from aiohttp_stubgen.codegen.description import load_description
from aiohttp_stubgen.codegen.generator import StubGenerator
from aiohttp_stubgen.config import get_config
from aiohttp_stubgen.exceptions import StubgenError

console = Console()
app = typer.Typer(
    name='aiohttp-stubgen',
    help='Derive aiohttp server-stub metadata from API descriptions',
    no_args_is_help=True,
)

ConfigOption = Annotated[
    str | None,
    typer.Option('--config', '-c', help='Path to configuration file (YAML or JSON)'),
]
DescriptionOption = Annotated[
    str | None,
    typer.Option(
        '--description', '-d', help='Path or URL to parsed API description metadata'
    ),
]


def _build_generator(config: str | None, description: str | None) -> StubGenerator:
    options = get_config(config)
    source = description or options.description
    api_description = load_description(source) if source else None
    return StubGenerator(options, api_description)


@app.command()
def properties(config: ConfigOption = None, description: DescriptionOption = None) -> None:
    """Show the resolved property set of a generation run.

    Examples:
        aiohttp-stubgen properties
        aiohttp-stubgen properties --config my-config.yaml -d petstore-meta.yaml
    """
    try:
        generator = _build_generator(config, description)
        resolved = generator.context.properties()
    except StubgenError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    table = Table(title='Resolved properties')
    table.add_column('Property', style='cyan')
    table.add_column('Value')
    for key, value in resolved.items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def layout(config: ConfigOption = None, description: DescriptionOption = None) -> None:
    """Show where each kind of generated artifact is written."""
    try:
        generator = _build_generator(config, description)
        resolved = generator.context.layout
    except StubgenError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    table = Table(title=f'Layout of {resolved.package_name}')
    table.add_column('Artifact', style='cyan')
    table.add_column('Folder')
    table.add_row('models', resolved.model_file_folder)
    table.add_row('controllers', resolved.api_file_folder)
    table.add_row('controller tests', resolved.api_test_file_folder)
    table.add_row('handlers', resolved.handler_file_folder)
    console.print(table)

    console.print('[dim]Supporting files:[/dim]')
    for supporting_file in resolved.supporting_files():
        console.print(f'  - {resolved.output_path(supporting_file.path)}')


@app.command()
def version() -> None:
    """Show the version of aiohttp-stubgen."""
    from aiohttp_stubgen import __version__

    console.print(f'aiohttp-stubgen version: {__version__}')


if __name__ == '__main__':
    app()
