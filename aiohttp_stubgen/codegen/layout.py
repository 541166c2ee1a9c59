"""Directory layout of the generated server-stub project.

The layout is pure path algebra over the package name, the output folder and
a few relative-directory options. Directories are ``/`` separated and
relative to the output folder; an empty string means the output folder
itself.
"""

from __future__ import annotations

import dataclasses
from pathlib import PurePath

from aiohttp_stubgen.codegen.utils import join_path, normalize_relative_path, underscore

__all__ = ['Layout', 'SupportingFile', 'resolve_layout', 'relative_package_dir']

DEFAULT_TESTS_ROOT = 'tests'


@dataclasses.dataclass(frozen=True)
class SupportingFile:
    """A non per-model, non per-operation file of the generated project.

    Attributes:
        template: Name of the template rendering the file.
        folder: Directory relative to the output folder.
        destination: File name inside ``folder``.
    """

    template: str
    folder: str
    destination: str

    @property
    def path(self) -> str:
        return join_path(self.folder, self.destination)


def relative_package_dir(package_name: str, target_package: str | None) -> str:
    """Directory of ``target_package`` relative to the root package directory.

    The root package prefix is stripped when present; a blank target or the
    root package itself maps to the package root (``''``).

    Example:
        >>> relative_package_dir('shop', 'shop.api.handlers')
        'api/handlers'
    """
    if not target_package or not target_package.strip():
        return ''
    target = target_package.strip()
    if target == package_name:
        return ''
    prefix = package_name + '.'
    if target.startswith(prefix):
        target = target[len(prefix) :]
    return target.replace('.', '/')


@dataclasses.dataclass(frozen=True)
class Layout:
    """Resolved output directories for one generation run.

    Attributes:
        package_name: The normalized dotted package name.
        output_folder: The folder everything is generated into.
        source_root: Relative source root ('' when sources sit at the top).
        tests_root: Tests directory relative to the package root.
        handler_package: Dotted package of the handler interfaces.
        flatten: True when the output folder already is the package.
        package_root_dir: Directory of the root package.
        controllers_dir: Directory of the generated controllers.
        schemas_dir: Directory of the generated models.
        handlers_dir: Directory of the handler interfaces.
        tests_dir: Directory of the generated tests.
        controller_tests_dir: Directory of the generated controller tests.
    """

    package_name: str
    output_folder: str
    source_root: str
    tests_root: str
    handler_package: str
    flatten: bool
    package_root_dir: str
    controllers_dir: str
    schemas_dir: str
    handlers_dir: str
    tests_dir: str
    controller_tests_dir: str

    def output_path(self, relative: str) -> str:
        """Join a layout directory onto the output folder."""
        if not relative:
            return self.output_folder
        return join_path(self.output_folder, relative)

    @property
    def model_file_folder(self) -> str:
        return self.output_path(self.schemas_dir)

    @property
    def api_file_folder(self) -> str:
        return self.output_path(self.controllers_dir)

    @property
    def api_test_file_folder(self) -> str:
        return self.output_path(self.controller_tests_dir)

    @property
    def handler_file_folder(self) -> str:
        return self.output_path(self.handlers_dir)

    def model_filename(self, classname: str) -> str:
        return f'{underscore(classname)}.py'

    def controller_filename(self, group: str) -> str:
        return f'{underscore(group)}_controller.py'

    def controller_test_filename(self, group: str) -> str:
        return f'{underscore(group)}_controller_test.py'

    def handler_filename(self, group: str) -> str:
        return f'{underscore(group)}_handler.py'

    def supporting_files(self) -> list[SupportingFile]:
        """The supporting files of the stub project and where they land."""
        return [
            SupportingFile('app.mustache', self.package_root_dir, 'app.py'),
            SupportingFile('__init__main.mustache', self.package_root_dir, '__init__.py'),
            SupportingFile('typing_utils.mustache', self.package_root_dir, 'typing_utils.py'),
            SupportingFile('util.mustache', self.package_root_dir, 'util.py'),
            SupportingFile('__init__.mustache', self.controllers_dir, '__init__.py'),
            SupportingFile('handler_init.mustache', self.handlers_dir, '__init__.py'),
            SupportingFile('handler_base.mustache', self.handlers_dir, 'base.py'),
            SupportingFile('base_model.mustache', self.schemas_dir, 'base_model.py'),
            SupportingFile('__init__model.mustache', self.schemas_dir, '__init__.py'),
            SupportingFile('conftest.mustache', self.tests_dir, 'conftest.py'),
            SupportingFile('__init__test.mustache', self.tests_dir, '__init__.py'),
        ]


def resolve_layout(
    package_name: str,
    output_folder: str,
    source_root: str | None = '',
    tests_root: str | None = DEFAULT_TESTS_ROOT,
    handler_package: str | None = None,
) -> Layout:
    """Compute the directory tree of the generated project.

    The package is flattened (no package directory is created) exactly when
    the package name is not dot-qualified and equals the last segment of the
    output folder, i.e. the output folder already is the package. Otherwise
    the package lives in ``<source_root>/<package/as/path>``.

    Args:
        package_name: The normalized dotted package name.
        output_folder: The output folder; only its last segment is compared.
        source_root: Relative source root; blank or ``.`` means none.
        tests_root: Tests directory under the package root; blank or ``.``
            puts tests directly in the package root.
        handler_package: Dotted package of the handler interfaces, defaults
            to ``<package_name>.handlers``.

    Returns:
        The resolved Layout. The same inputs always give an equal Layout.
    """
    if handler_package is None or not handler_package.strip():
        handler_package = f'{package_name}.handlers'
    handler_package = handler_package.strip()

    output_dir_name = PurePath(output_folder).name if output_folder else ''
    flatten = '.' not in package_name and output_dir_name == package_name

    source_root = normalize_relative_path(source_root)
    tests_root = normalize_relative_path(tests_root)

    if flatten:
        package_root_dir = ''
    else:
        package_root_dir = join_path(source_root, package_name.replace('.', '/'))

    tests_dir = join_path(package_root_dir, tests_root)

    return Layout(
        package_name=package_name,
        output_folder=output_folder,
        source_root=source_root,
        tests_root=tests_root,
        handler_package=handler_package,
        flatten=flatten,
        package_root_dir=package_root_dir,
        controllers_dir=join_path(package_root_dir, 'controllers'),
        schemas_dir=join_path(package_root_dir, 'schemas'),
        handlers_dir=join_path(
            package_root_dir, relative_package_dir(package_name, handler_package)
        ),
        tests_dir=tests_dir,
        controller_tests_dir=join_path(tests_dir, 'controllers'),
    )
