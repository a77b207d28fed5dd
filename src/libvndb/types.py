"""Type aliases for the libvndb package.

Reusable type definitions shared by the query model and the client.
"""

from typing import Any, Dict, Sequence, Union

from .query import QueryFormat
from .schema import UlistLabels, UserStats

# Query body accepted by the POST helpers: a built query or its payload dict
Query = Union[QueryFormat, Dict[str, Any]]

# User identifiers accepted by the user lookup: one id/name or several
UserIds = Union[str, Sequence[str]]

__all__ = ("Query", "UserIds", "UserStats", "UlistLabels")
