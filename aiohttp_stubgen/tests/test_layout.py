"""Tests for the layout resolver.

This module tests resolve_layout and the Layout dataclass used to place
generated sources, tests and handler interfaces.
"""

import pytest

from aiohttp_stubgen.codegen.layout import (
    Layout,
    SupportingFile,
    relative_package_dir,
    resolve_layout,
)


class TestFlattening:
    """Tests for the flatten-vs-nested decision."""

    def test_flatten_when_output_folder_is_package(self):
        layout = resolve_layout('shop', 'shop')
        assert layout.flatten is True
        assert layout.package_root_dir == ''
        assert layout.schemas_dir == 'schemas'
        assert layout.controllers_dir == 'controllers'

    def test_flatten_compares_last_segment_only(self):
        layout = resolve_layout('shop', '/tmp/out/shop')
        assert layout.flatten is True
        assert layout.package_root_dir == ''

    def test_flatten_with_trailing_slash(self):
        assert resolve_layout('shop', 'build/shop/').flatten is True

    def test_flatten_ignores_source_root(self):
        layout = resolve_layout('shop', 'shop', source_root='src')
        assert layout.package_root_dir == ''

    def test_no_flatten_for_dotted_package(self):
        layout = resolve_layout('shop.api', 'generated-code', source_root='src')
        assert layout.flatten is False
        assert layout.package_root_dir == 'src/shop/api'
        assert layout.schemas_dir == 'src/shop/api/schemas'

    def test_no_flatten_for_dotted_package_matching_folder(self):
        layout = resolve_layout('shop.api', 'api')
        assert layout.flatten is False
        assert layout.package_root_dir == 'shop/api'

    def test_no_flatten_when_names_differ(self):
        layout = resolve_layout('shop', 'generated-code')
        assert layout.flatten is False
        assert layout.package_root_dir == 'shop'


class TestDirectories:
    """Tests for the derived directories."""

    def test_default_directories(self):
        layout = resolve_layout('shop', 'out')
        assert layout.controllers_dir == 'shop/controllers'
        assert layout.schemas_dir == 'shop/schemas'
        assert layout.handlers_dir == 'shop/handlers'
        assert layout.tests_dir == 'shop/tests'
        assert layout.controller_tests_dir == 'shop/tests/controllers'

    def test_source_root_dot_means_none(self):
        layout = resolve_layout('shop', 'out', source_root='.')
        assert layout.source_root == ''
        assert layout.package_root_dir == 'shop'

    @pytest.mark.parametrize('tests_root', ['.', '', '  ', None])
    def test_tests_directly_under_package_root(self, tests_root):
        layout = resolve_layout('shop', 'out', tests_root=tests_root)
        assert layout.tests_dir == 'shop'
        assert layout.controller_tests_dir == 'shop/controllers'

    def test_custom_tests_root(self):
        layout = resolve_layout('shop', 'shop', tests_root='test_suite')
        assert layout.tests_dir == 'test_suite'
        assert layout.controller_tests_dir == 'test_suite/controllers'

    def test_handler_package_under_root(self):
        layout = resolve_layout('shop', 'out', handler_package='shop.api.handlers')
        assert layout.handlers_dir == 'shop/api/handlers'

    def test_handler_package_is_root(self):
        layout = resolve_layout('shop', 'out', handler_package='shop')
        assert layout.handlers_dir == 'shop'

    def test_handler_package_outside_root(self):
        layout = resolve_layout('shop', 'out', handler_package='impl.handlers')
        assert layout.handlers_dir == 'shop/impl/handlers'

    def test_handler_package_defaults(self):
        layout = resolve_layout('shop', 'out', handler_package='  ')
        assert layout.handler_package == 'shop.handlers'
        assert layout.handlers_dir == 'shop/handlers'

    def test_deterministic(self):
        args = ('shop.api', 'generated', 'src', 'tests', 'shop.api.impl')
        assert resolve_layout(*args) == resolve_layout(*args)


class TestRelativePackageDir:
    def test_strips_prefix(self):
        assert relative_package_dir('shop', 'shop.handlers') == 'handlers'

    def test_prefix_must_be_whole_segment(self):
        assert relative_package_dir('shop', 'shopping.handlers') == 'shopping/handlers'

    def test_blank(self):
        assert relative_package_dir('shop', None) == ''
        assert relative_package_dir('shop', '') == ''


class TestArtifactFolders:
    """Tests for output folders and file names per artifact kind."""

    @pytest.fixture
    def layout(self) -> Layout:
        return resolve_layout('shop', 'out')

    def test_output_path(self, layout):
        assert layout.output_path('') == 'out'
        assert layout.output_path('shop/schemas') == 'out/shop/schemas'

    def test_folders(self, layout):
        assert layout.model_file_folder == 'out/shop/schemas'
        assert layout.api_file_folder == 'out/shop/controllers'
        assert layout.api_test_file_folder == 'out/shop/tests/controllers'
        assert layout.handler_file_folder == 'out/shop/handlers'

    def test_flattened_folders(self):
        layout = resolve_layout('shop', 'shop', handler_package='shop')
        assert layout.handler_file_folder == 'shop'
        assert layout.model_file_folder == 'shop/schemas'

    def test_file_names(self, layout):
        assert layout.model_filename('PetCategory') == 'pet_category.py'
        assert layout.controller_filename('StoreOrder') == 'store_order_controller.py'
        assert layout.controller_test_filename('Pet') == 'pet_controller_test.py'
        assert layout.handler_filename('Pet') == 'pet_handler.py'

    def test_supporting_files(self, layout):
        files = {f.path: f.template for f in layout.supporting_files()}
        assert files == {
            'shop/app.py': 'app.mustache',
            'shop/__init__.py': '__init__main.mustache',
            'shop/typing_utils.py': 'typing_utils.mustache',
            'shop/util.py': 'util.mustache',
            'shop/controllers/__init__.py': '__init__.mustache',
            'shop/handlers/__init__.py': 'handler_init.mustache',
            'shop/handlers/base.py': 'handler_base.mustache',
            'shop/schemas/base_model.py': 'base_model.mustache',
            'shop/schemas/__init__.py': '__init__model.mustache',
            'shop/tests/conftest.py': 'conftest.mustache',
            'shop/tests/__init__.py': '__init__test.mustache',
        }

    def test_supporting_file_in_output_root(self):
        supporting_file = SupportingFile('app.mustache', '', 'app.py')
        assert supporting_file.path == 'app.py'
