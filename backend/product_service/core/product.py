"""Product Entity: immutable in-memory representation of a persisted product row.

Invariants:
    - A transient product has id=None; the storage adapter assigns the id on insert
    - Once persisted, id never changes (with_fields keeps it)
    - Instances are frozen: mutation means producing a new value and saving it explicitly
"""

from dataclasses import dataclass, replace
from uuid import UUID


@dataclass(frozen=True)
class Product:
    """Product entity: title and details keyed by a storage-generated UUID."""
    title: str
    details: str
    id: UUID | None = None

    @classmethod
    def new(cls, title: str, details: str) -> "Product":
        """Transient product, not yet persisted."""
        return cls(title=title, details=details)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_fields(self, title: str, details: str) -> "Product":
        """Full replace of the mutable fields (no merge)."""
        return replace(self, title=title, details=details)
