import re

__all__ = (
    'capitalize',
    'join_path',
    'normalize_relative_path',
    'sanitize_context_path',
    'sanitize_package_name',
    'sanitize_package_token',
    'sanitize_port',
    'underscore',
)

DEFAULT_PACKAGE_NAME = 'aiohttp_server'
PLACEHOLDER_PACKAGE_TOKEN = 'pkg'

_ACRONYM_BOUNDARY = re.compile(r'([A-Z]+)([A-Z][a-z][a-z]+)')
_WORD_BOUNDARY = re.compile(r'([a-z\d])([A-Z])')
_INVALID_TOKEN_CHARS = re.compile(r'[^a-z0-9_]')


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def underscore(word: str) -> str:
    """Convert camelCase or PascalCase to snake_case.

    Runs of capitals are kept together, so ``HTTPServer`` becomes
    ``http_server`` and ``PetStore`` becomes ``pet_store``. Hyphens and
    spaces become underscores.
    """
    if not word:
        return ''
    result = word.replace('$', '__')
    result = _ACRONYM_BOUNDARY.sub(r'\1_\2', result)
    result = _WORD_BOUNDARY.sub(r'\1_\2', result)
    result = result.replace('-', '_').replace(' ', '_')
    return result.lower()


def sanitize_package_token(segment: str) -> str:
    """Sanitize a single dotted-name segment into a package identifier.

    - Replace hyphens and spaces with underscores
    - Convert to snake_case and strip characters outside ``[a-z0-9_]``
    - Fall back to a placeholder token when nothing survives
    - Prefix a leading digit with an underscore
    """
    candidate = segment.replace('-', '_').replace(' ', '_')
    snake = _INVALID_TOKEN_CHARS.sub('', underscore(candidate))
    if not snake:
        snake = PLACEHOLDER_PACKAGE_TOKEN
    if snake[0].isdigit():
        snake = '_' + snake
    return snake


def sanitize_package_name(raw: str | None, fallback_name: str | None = None) -> str:
    """Normalize a free-form string into a dotted Python package name.

    A raw value of ``.`` means "the output folder", in which case
    ``fallback_name`` is used when given. The result is always a non-empty
    dotted identifier.

    Examples:
        >>> sanitize_package_name('My-Service.v2 API')
        'my_service.v2_api'
        >>> sanitize_package_name('..')
        'aiohttp_server'
    """
    candidate = (raw or '').strip()
    if candidate == '.' and fallback_name:
        candidate = fallback_name

    tokens = [
        sanitize_package_token(segment.strip())
        for segment in candidate.split('.')
        if segment.strip()
    ]
    if not tokens:
        return DEFAULT_PACKAGE_NAME
    return '.'.join(tokens)


def sanitize_port(raw: str | int | None) -> str:
    """Return the trimmed port if it is all digits, otherwise ``''``.

    An empty result means "unset" so a caller-supplied default can apply.
    """
    if raw is None:
        return ''
    trimmed = str(raw).strip()
    if trimmed.isascii() and trimmed.isdigit():
        return trimmed
    return ''


def sanitize_context_path(raw: str | None) -> str:
    """Normalize a URL context path.

    Returns ``''`` for blank input or the root path, otherwise an absolute
    path with no trailing slash.
    """
    if raw is None or not raw.strip() or raw.strip() == '/':
        return ''
    result = raw.strip()
    if not result.startswith('/'):
        result = '/' + result
    result = result.rstrip('/')
    # a path made only of slashes collapses to the empty root
    return result


def normalize_relative_path(raw: str | None) -> str:
    """Normalize a relative directory option; blank or ``.`` means none."""
    if raw is None:
        return ''
    value = raw.strip()
    if not value or value == '.':
        return ''
    return value.strip('/')


def join_path(*parts: str | None) -> str:
    """Join the non-blank parts with ``/``."""
    return '/'.join(part for part in parts if part and part.strip())
