"""
Text <-> registry conversion.

``loads`` is lenient about content (every missing field is repaired) but
strict about shape: the text must be JSON whose top level is an object, or a
bare list of cemeteries as written by older versions.
"""

import json
import logging
from typing import Any, Optional

from ..exceptions import DocumentFormatError
from ..logging.performance import timed
from ..models import GraveRegistry
from .writer import serialize_registry

logger = logging.getLogger(__name__)


def parse_document(text: str, source: Optional[str] = None) -> Any:
    """Parse registry text into plain data without building the tree."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise DocumentFormatError(f"not valid JSON: {e}", source) from e
    if not isinstance(data, (dict, list)):
        raise DocumentFormatError(f"top level is {type(data).__name__}, expected an object", source)
    return data


def validate_document(text: str, source: Optional[str] = None) -> dict:
    """Check that ``text`` is a storable document: an object with a cemeteries array."""
    data = parse_document(text, source)
    if not isinstance(data, dict):
        raise DocumentFormatError("top level is an array, expected an object", source)
    if not isinstance(data.get("cemeteries"), list):
        raise DocumentFormatError("missing 'cemeteries' array", source)
    return data


@timed("serialization.loads")
def loads(text: str, source: Optional[str] = None) -> GraveRegistry:
    registry = GraveRegistry.from_dict(parse_document(text, source))
    logger.debug(f"Loaded {len(registry.cemeteries)} cemeteries")
    return registry


@timed("serialization.dumps")
def dumps(registry: GraveRegistry) -> str:
    return serialize_registry(registry)
