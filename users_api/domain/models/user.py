# Standard library imports
from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True)
class User:
    """Pure domain model for User entity - no external dependencies"""
    full_name: str
    id: UUID = field(default_factory=uuid4)
