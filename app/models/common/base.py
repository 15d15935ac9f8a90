"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar


@dataclass
class BaseEntity:
    """Base class for all stored entities.

    Fields named in ``BIG_INTS`` hold uint256 values and are stored as
    decimal strings.
    """

    BIG_INTS: ClassVar[tuple[str, ...]] = ()

    id: str

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    def to_row(self) -> dict[str, Any]:
        """Convert entity to a storable row."""
        row = self.to_dict()
        for name in self.BIG_INTS:
            if row[name] is not None:
                row[name] = str(row[name])
        return row

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "BaseEntity":
        """Build entity from a stored row."""
        values = dict(row)
        for name in cls.BIG_INTS:
            if values[name] is not None:
                values[name] = int(values[name])
        return cls(**values)

    @classmethod
    def columns(cls) -> list[str]:
        """Column names in declaration order."""
        return [f.name for f in fields(cls)]
