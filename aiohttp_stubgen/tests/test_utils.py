"""Test name and path sanitizing utilities."""

import re

import pytest

from aiohttp_stubgen.codegen.utils import (
    join_path,
    normalize_relative_path,
    sanitize_context_path,
    sanitize_package_name,
    sanitize_package_token,
    sanitize_port,
    underscore,
)

VALID_PACKAGE_NAME = re.compile(r'^[a-z_][a-z0-9_]*(\.[a-z_][a-z0-9_]*)*$')


class TestUnderscore:
    """Test underscore function."""

    def test_camel_case(self):
        assert underscore('PetStore') == 'pet_store'
        assert underscore('petStore') == 'pet_store'

    def test_acronyms(self):
        assert underscore('HTTPServer') == 'http_server'
        assert underscore('APIKeyHandler') == 'api_key_handler'

    def test_separators(self):
        assert underscore('pet-store') == 'pet_store'
        assert underscore('pet store') == 'pet_store'

    def test_digits(self):
        assert underscore('Pet2Store') == 'pet2_store'

    def test_already_snake(self):
        assert underscore('pet_store') == 'pet_store'

    def test_empty(self):
        assert underscore('') == ''


class TestSanitizePackageName:
    """Test sanitize_package_name function."""

    def test_simple_names(self):
        assert sanitize_package_name('shop') == 'shop'
        assert sanitize_package_name('shop.api') == 'shop.api'

    def test_hyphens_and_spaces(self):
        assert sanitize_package_name('my-shop') == 'my_shop'
        assert sanitize_package_name('my shop.public api') == 'my_shop.public_api'

    def test_camel_case_segments(self):
        assert sanitize_package_name('PetStore.ApiV2') == 'pet_store.api_v2'

    def test_trims_and_drops_empty_segments(self):
        assert sanitize_package_name('  shop..api. ') == 'shop.api'

    def test_leading_digit(self):
        assert sanitize_package_name('3d.models') == '_3d.models'

    def test_invalid_characters_only_segment(self):
        assert sanitize_package_name('shop.@@@') == 'shop.pkg'

    def test_empty_input_uses_default(self):
        assert sanitize_package_name('') == 'aiohttp_server'
        assert sanitize_package_name(None) == 'aiohttp_server'
        assert sanitize_package_name('...') == 'aiohttp_server'

    def test_dot_uses_fallback_name(self):
        assert sanitize_package_name('.', 'my-service') == 'my_service'

    def test_dot_without_fallback(self):
        assert sanitize_package_name('.') == 'aiohttp_server'

    @pytest.mark.parametrize(
        'raw', ['', '.', '@', '  ', '-', '.-.', '$$.%%', '123', 'Ü', 'a..b', '_']
    )
    def test_result_is_always_valid(self, raw):
        """Any input gives a non-empty dotted identifier."""
        assert VALID_PACKAGE_NAME.match(sanitize_package_name(raw))


class TestSanitizePackageToken:
    def test_placeholder(self):
        assert sanitize_package_token('!!!') == 'pkg'

    def test_digit_prefix(self):
        assert sanitize_package_token('2fa') == '_2fa'


class TestSanitizePort:
    """Test sanitize_port function."""

    def test_digits(self):
        assert sanitize_port('8080') == '8080'
        assert sanitize_port(' 443 ') == '443'
        assert sanitize_port(9000) == '9000'

    def test_invalid_means_unset(self):
        assert sanitize_port('') == ''
        assert sanitize_port(None) == ''
        assert sanitize_port('80a') == ''
        assert sanitize_port('-1') == ''
        assert sanitize_port('8 080') == ''

    def test_non_ascii_digits(self):
        assert sanitize_port('٨٠') == ''


class TestSanitizeContextPath:
    """Test sanitize_context_path function."""

    def test_empty_and_root(self):
        assert sanitize_context_path('') == ''
        assert sanitize_context_path(None) == ''
        assert sanitize_context_path('/') == ''
        assert sanitize_context_path(' / ') == ''

    def test_adds_leading_slash(self):
        assert sanitize_context_path('api') == '/api'

    def test_strips_trailing_slashes(self):
        assert sanitize_context_path('/api/v1///') == '/api/v1'

    def test_only_slashes(self):
        assert sanitize_context_path('///') == ''

    @pytest.mark.parametrize(
        'raw', ['', '/', 'api', '/api/', ' v1/shop/ ', '//', '/a//b/']
    )
    def test_idempotent(self, raw):
        once = sanitize_context_path(raw)
        assert sanitize_context_path(once) == once
        assert once == '' or (once.startswith('/') and not once.endswith('/'))


class TestPathHelpers:
    def test_normalize_relative_path(self):
        assert normalize_relative_path('.') == ''
        assert normalize_relative_path('  ') == ''
        assert normalize_relative_path(None) == ''
        assert normalize_relative_path('src/') == 'src'

    def test_join_path_skips_blanks(self):
        assert join_path('', 'shop', None, 'schemas') == 'shop/schemas'
        assert join_path('', '') == ''
