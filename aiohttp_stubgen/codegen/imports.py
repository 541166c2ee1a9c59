"""Import rewriting for generated controllers, handlers and models.

Generated code imports its schema types relative to its own location so it
does not depend on the name the package is installed under. Models also get
their own class name quoted in their property types so a model can refer to
itself before it is fully defined.
"""

import logging
from collections.abc import Iterable, Iterator

from aiohttp_stubgen.codegen.types import Model, RewrittenModel
from aiohttp_stubgen.codegen.utils import underscore

__all__ = ['ImportRewriter', 'quote_self_reference', 'tokenize_type_expression']

logger = logging.getLogger(__name__)

MODELS_SEGMENT = '.models.'
SCHEMAS_SEGMENT = '.schemas.'

_QUOTES = ('"', "'")
_TYPE_FIELDS = ('data_type', 'datatype_with_enum', 'base_type', 'complex_type')


def _is_name_start(char: str) -> bool:
    return char.isalpha() or char == '_'


def _is_name_char(char: str) -> bool:
    return char.isalnum() or char == '_'


def tokenize_type_expression(expression: str) -> Iterator[tuple[str, str]]:
    """Split a type expression into ``(kind, text)`` tokens.

    Kinds are ``'name'`` for (possibly dotted) identifiers, ``'string'`` for
    quoted literals including their quotes, and ``'other'`` for everything
    else (brackets, commas, pipes, whitespace, numbers). Concatenating the
    texts gives back the expression unchanged.

    Example:
        >>> list(tokenize_type_expression("list['Node'] | None"))
        [('name', 'list'), ('other', '['), ('string', "'Node'"), ('other', ']'),
         ('other', ' '), ('other', '|'), ('other', ' '), ('name', 'None')]
    """
    i = 0
    length = len(expression)
    while i < length:
        char = expression[i]
        if char in _QUOTES:
            end = i + 1
            while end < length and expression[end] != char:
                end += 2 if expression[end] == '\\' else 1
            end = min(end + 1, length)
            yield 'string', expression[i:end]
            i = end
        elif _is_name_start(char):
            end = i + 1
            while end < length:
                if _is_name_char(expression[end]):
                    end += 1
                elif (
                    expression[end] == '.'
                    and end + 1 < length
                    and _is_name_start(expression[end + 1])
                ):
                    end += 1
                else:
                    break
            yield 'name', expression[i:end]
            i = end
        elif char.isdigit():
            end = i + 1
            while end < length and _is_name_char(expression[end]):
                end += 1
            yield 'other', expression[i:end]
            i = end
        else:
            yield 'other', char
            i += 1


def quote_self_reference(class_name: str | None, type_expression: str | None) -> str | None:
    """Quote every bare reference to ``class_name`` inside ``type_expression``.

    Only whole identifiers are matched, so ``NodeList`` is left alone when the
    class is ``Node``; a dotted name is quoted whole when any segment matches.
    References already inside quotes are untouched, which makes the function
    idempotent.

    Example:
        >>> quote_self_reference('Node', 'list[Node] | None')
        "list['Node'] | None"
    """
    if not type_expression or not type_expression.strip():
        return type_expression
    if not class_name or not class_name.strip():
        return type_expression
    if class_name not in type_expression:
        return type_expression

    parts = []
    for kind, text in tokenize_type_expression(type_expression):
        if kind == 'name' and class_name in text.split('.'):
            text = f"'{text}'"
        parts.append(text)
    return ''.join(parts)


class ImportRewriter:
    """Rewrites package-qualified imports into layout-relative ones.

    The description parser places models in a ``models`` package; the
    generated project calls it ``schemas``. Statements into the model package
    become ``from ..schemas.<module> import ...``, statements into the root
    package become ``from ..<module> import ...``, which is correct from the
    controllers and handlers sub-packages.

    Example:
        >>> rewriter = ImportRewriter('shop', model_package='shop.models')
        >>> rewriter.to_relative_import('from shop.models.widget import Widget')
        'from ..schemas.widget import Widget'
    """

    def __init__(self, package_name: str, model_package: str | None = None):
        self.package_name = package_name
        self.model_package = model_package or f'{package_name}.schemas'

    def _prefixes(self) -> tuple[str, ...]:
        model_prefix = f'from {self.model_package}.'
        redirected = model_prefix.replace(MODELS_SEGMENT, SCHEMAS_SEGMENT)
        return tuple(dict.fromkeys((model_prefix, redirected)))

    def to_relative_import(self, statement: str | None) -> str | None:
        """Make an absolute import statement relative to the layout."""
        if not statement or not statement.strip():
            return statement

        normalized = statement.replace(MODELS_SEGMENT, SCHEMAS_SEGMENT)
        for prefix in self._prefixes():
            if normalized.startswith(prefix):
                return 'from ..schemas.' + normalized[len(prefix) :]

        root_prefix = f'from {self.package_name}.'
        if normalized.startswith(root_prefix):
            return 'from ..' + normalized[len(root_prefix) :]
        return normalized

    def rewrite_imports(self, statements: Iterable[str]) -> tuple[str, ...]:
        return tuple(self.to_relative_import(s) for s in statements if s)

    def to_model_import(self, name: str) -> str:
        """Relative import statement for the model class ``name``."""
        return self.to_relative_import(
            f'from {self.model_package}.{underscore(name)} import {name}'
        )

    def model_imports(self, model: Model) -> tuple[str, ...]:
        """Sibling imports for each model ``model`` depends on.

        Blank entries and the model itself are skipped.
        """
        imports = []
        for dependency in model.imports:
            if not dependency or not dependency.strip() or dependency == model.classname:
                continue
            statement = f'from .{underscore(dependency)} import {dependency}'
            if statement not in imports:
                imports.append(statement)
        return tuple(imports)

    def rewrite_model(self, model: Model) -> RewrittenModel:
        """Quote self references in every property type and attach imports."""
        properties = []
        for prop in model.vars:
            updates = {
                field: quote_self_reference(model.classname, getattr(prop, field))
                for field in _TYPE_FIELDS
            }
            properties.append(prop.model_copy(update=updates))

        py_imports = self.model_imports(model)
        logger.debug(
            f'Rewrote model {model.classname} with {len(py_imports)} relative imports'
        )
        return RewrittenModel(
            model=model.model_copy(update={'vars': tuple(properties)}),
            py_imports=py_imports,
        )
