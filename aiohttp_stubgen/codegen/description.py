"""Loading of parsed API description metadata.

The description parser runs elsewhere; this module only reads the metadata it
produced (operation groups, models, servers, info) from a YAML or JSON
document on disk or behind a URL and validates it into an ApiDescription.
"""

from pathlib import Path
from urllib.parse import urlparse

import httpx
import yaml
from pydantic import ValidationError

from aiohttp_stubgen.codegen.types import ApiDescription
from aiohttp_stubgen.exceptions import DescriptionLoadError

__all__ = ['DescriptionLoader', 'load_description']


def is_url(text: str) -> bool:
    try:
        result = urlparse(text)
        return all([result.scheme, result.netloc])
    except (AttributeError, ValueError):
        return False


class DescriptionLoader:
    """Loads ApiDescription metadata from URLs or file paths.

    Example:
        >>> loader = DescriptionLoader()
        >>> description = loader.load('https://example.com/petstore-meta.json')
        >>> # or
        >>> description = loader.load('./petstore-meta.yaml')
    """

    def __init__(self, http_client: httpx.Client | None = None):
        """Initialize the loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
        """
        self._http_client = http_client

    def load(self, source: str) -> ApiDescription:
        """Load and validate description metadata.

        Raises:
            DescriptionLoadError: If the source cannot be read, is not YAML or
                JSON, or does not validate.
        """
        try:
            if is_url(source):
                content = self._load_from_url(source)
            else:
                content = self._load_from_file(source)
            return ApiDescription.model_validate(content or {})
        except (
            httpx.HTTPError,
            OSError,
            UnicodeDecodeError,
            yaml.YAMLError,
            ValidationError,
        ) as e:
            raise DescriptionLoadError(source, e) from e

    def _load_from_url(self, url: str) -> dict:
        if self._http_client:
            response = self._http_client.get(url)
        else:
            response = httpx.get(url)

        response.raise_for_status()
        # YAML is a superset of JSON
        return yaml.safe_load(response.text)

    def _load_from_file(self, file_path: str) -> dict:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f'Description file not found: {file_path}')
        return yaml.safe_load(path.read_text(encoding='utf-8'))


def load_description(
    source: str, http_client: httpx.Client | None = None
) -> ApiDescription:
    return DescriptionLoader(http_client).load(source)
