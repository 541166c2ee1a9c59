"""Server defaults resolution.

Derives the port the generated aiohttp application listens on and the
context path its routes are mounted under from the servers declared in the
API description. Explicit user options always take precedence.
"""

import dataclasses
import logging
import re
from collections.abc import Iterable
from urllib.parse import SplitResult, unquote, urlsplit

from aiohttp_stubgen.codegen.types import Server
from aiohttp_stubgen.codegen.utils import sanitize_context_path, sanitize_port

__all__ = [
    'DEFAULT_SERVER_PORT',
    'ServerDefaults',
    'resolve_server_defaults',
    'resolve_server_url',
]

logger = logging.getLogger(__name__)

DEFAULT_SERVER_PORT = '8080'

_SCHEME_PORTS = {'https': 443, 'http': 80}

# Characters that are never legal in a URI; unresolved {placeholders} included.
_ILLEGAL_URI_CHARS = re.compile(r'[\s"<>\\^`{|}]')


@dataclasses.dataclass(frozen=True)
class ServerDefaults:
    """Resolved listen port (digits) and context path ('' means root)."""

    port: str = DEFAULT_SERVER_PORT
    context_path: str = ''


def _substitute_variables(server: Server) -> str:
    resolved = server.url or ''
    for name, variable in server.variables.items():
        default = variable.default if variable is not None else None
        replacement = default if default and default.strip() else name
        resolved = resolved.replace('{' + name + '}', replacement)
    return resolved


def resolve_server_url(server: Server | None) -> SplitResult | None:
    """Substitute the server variables into its URL template and parse it.

    Every ``{name}`` placeholder with a declared variable is replaced by the
    variable's default, or by the variable name when no default is declared.
    Placeholders without a declared variable are left alone, which makes the
    URL unparsable.

    Returns:
        The parsed URL, or None if the server has no URL or it cannot be parsed.
    """
    if server is None or not server.url or not server.url.strip():
        return None

    resolved = _substitute_variables(server).strip()
    if _ILLEGAL_URI_CHARS.search(resolved):
        logger.debug(f'Skipping server with unparsable URL: {resolved}')
        return None

    try:
        parts = urlsplit(resolved)
        # accessing the port validates it
        parts.port
    except ValueError as e:
        logger.debug(f'Skipping server with unparsable URL {resolved}: {e}')
        return None
    return parts


def _port_of(url: SplitResult) -> str:
    port = url.port or 0
    if port <= 0 and url.scheme:
        port = _SCHEME_PORTS.get(url.scheme.lower(), 0)
    return str(port) if port > 0 else ''


def resolve_server_defaults(
    servers: Iterable[Server] | None,
    explicit_port: str | int | None = None,
    explicit_context_path: str | None = None,
) -> ServerDefaults:
    """Resolve the listen port and context path for the generated server.

    Explicit values are sanitized first and, when they survive, suppress the
    inference for their field. Otherwise the declared servers are scanned in
    order: the first URL carrying (or implying, via its scheme) a port decides
    the port, the first URL with a non-root path decides the context path.
    The scan stops once both are known. Whatever is still unresolved falls
    back to port 8080 and the root context path.

    Example:
        >>> server = Server(
        ...     url='https://api.example.com/{version}/shop',
        ...     variables={'version': ServerVariable(default='v2')},
        ... )
        >>> resolve_server_defaults([server])
        ServerDefaults(port='443', context_path='/v2/shop')
    """
    port = sanitize_port(explicit_port)
    context_path = sanitize_context_path(explicit_context_path)

    for server in servers or ():
        if port and context_path:
            break

        url = resolve_server_url(server)
        if url is None:
            continue

        if not port:
            port = _port_of(url)
        if not context_path and url.path.strip():
            context_path = sanitize_context_path(unquote(url.path))

    if not port:
        logger.debug(f'No server port resolved, using {DEFAULT_SERVER_PORT}')
        port = DEFAULT_SERVER_PORT

    return ServerDefaults(port=port, context_path=context_path)
