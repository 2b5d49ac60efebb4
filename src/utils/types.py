"""Common types for the project."""

from typing import Any, Mapping, Sequence

# repository object as decoded from the GitHub JSON payload
RepositoryRecord = Mapping[str, Any]

RepositoryList = Sequence[RepositoryRecord]
