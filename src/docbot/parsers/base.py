from abc import ABC, abstractmethod
from typing import Any

from docbot.models import DocEntity


class BaseParser(ABC):
    """Abstract base class for documentation-generator output parsers."""

    @abstractmethod
    def extract_entities(self, records: list[Any]) -> list[DocEntity]:
        """Normalize decoded generator records into documented entities.

        Args:
            records: Decoded JSON records, in source order

        Returns:
            List of DocEntity objects, in source order
        """
        pass
