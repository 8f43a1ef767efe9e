"""Data models for transaction categorization."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Spending categories assigned to transactions.

    Values are the exact labels stored on persisted transactions, so they
    must never be renamed.
    """

    FOOD = "FOOD"
    TRANSPORTATION = "TRANSPORTATION"
    ENTERTAINMENT = "ENTERTAINMENT"
    UTILITIES = "UTILITIES"
    SHOPPING = "SHOPPING"
    HEALTHCARE = "HEALTHCARE"
    EDUCATION = "EDUCATION"
    TRAVEL = "TRAVEL"
    SALARY = "SALARY"
    OTHER = "OTHER"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Category":
        """Parse a stored or user-supplied label.

        Args:
            label: Category label, matched case-insensitively after trimming.

        Returns:
            The matching Category.

        Raises:
            ValueError: If the label is not one of the known categories.
        """
        normalized = label.strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            known = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown category: {label!r}. Known: {known}") from None


@dataclass(frozen=True)
class TrainingExample:
    """A labeled transaction description."""

    description: str
    category: Category


@dataclass
class ClassifierStats:
    """Summary of a trained classifier.

    Attributes:
        total_documents: Number of training examples.
        vocabulary_size: Number of distinct tokens across all examples.
        category_counts: Training examples per category label.
        token_totals: Total token occurrences per category label.
    """

    total_documents: int = 0
    vocabulary_size: int = 0
    category_counts: dict[str, int] = field(default_factory=dict)
    token_totals: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "total_documents": self.total_documents,
            "vocabulary_size": self.vocabulary_size,
            "category_counts": dict(self.category_counts),
            "token_totals": dict(self.token_totals),
        }
