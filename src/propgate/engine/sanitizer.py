"""Schema-bound facade over the processing engine."""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from propgate.schema.loaders import build_schema, load_schema_from_file
from propgate.schema.models import PropertySpec, Schema

from .core import process
from .errors import SanitizationError
from .results import Err, ProcessResult

logger = logging.getLogger(__name__)


class Sanitizer:
    """Processes inputs against one schema.

    The schema is stored as an immutable tuple, so a single ``Sanitizer``
    can serve any number of callers and threads.

    Example:
        >>> from propgate.engine import Sanitizer
        >>> from propgate.schema import IntRangeValidator, optional, prop
        >>>
        >>> sanitizer = Sanitizer([prop("limit", optional(10), IntRangeValidator(minimum=1, maximum=100))])
        >>> sanitizer.sanitize({"limit": 25, "debug": True})
        {'limit': 25}
        >>> sanitizer.sanitize({})
        {'limit': 10}
    """

    def __init__(self, schema: Sequence[PropertySpec]):
        """Initialize the sanitizer with a schema.

        Args:
            schema: Ordered property declarations
        """
        self.schema: Schema = tuple(schema)

    @classmethod
    def from_dict(cls, schema_dict: Mapping[str, Any] | list[Any]) -> "Sanitizer":
        """Create a Sanitizer from a decoded schema document.

        Args:
            schema_dict: Mapping with a 'properties' list, or the list itself

        Returns:
            Sanitizer instance
        """
        return cls(build_schema(schema_dict))

    @classmethod
    def from_file(cls, path: str | Path) -> "Sanitizer":
        """Create a Sanitizer from a YAML or JSON schema file."""
        schema = load_schema_from_file(path)
        logger.debug(f"Loaded schema from {path}")
        return cls(schema)

    @property
    def property_names(self) -> list[str]:
        """Names of the declared properties, in declaration order."""
        return [spec.name for spec in self.schema]

    def process(self, params: Mapping[str, Any]) -> ProcessResult:
        """Process ``params``; see :func:`propgate.engine.process`."""
        return process(params, self.schema)

    def sanitize(self, params: Mapping[str, Any]) -> Any:
        """Process ``params`` and return the sanitized output.

        Raises:
            SanitizationError: If ``params`` fails the schema
        """
        result = self.process(params)
        if isinstance(result, Err):
            raise SanitizationError.from_err(result)
        return result.value
