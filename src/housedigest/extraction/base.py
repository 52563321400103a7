"""Abstract base class for listing section parsers.

A section parser turns the body of one listing section into a
PropertyRecord. Heading detection and document splitting live in
``extract_properties``; parsers only see one section at a time, so an
alternative note layout can be supported by adding a parser without
touching ranking or rendering.

Example usage:
    class MyParser(SectionParser):
        name = "my_layout"

        def parse_section(self, rank, address, body):
            # Implementation here
            pass
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.property import PropertyRecord


class SectionParser(ABC):
    """Abstract base class for section parsers.

    Attributes:
        name: Unique identifier for the note layout this parser understands
    """

    name: str

    @abstractmethod
    def parse_section(
        self,
        rank: int,
        address: str,
        body: str,
    ) -> Optional[PropertyRecord]:
        """Build a record from one section.

        Args:
            rank: Rank number taken from the section heading
            address: Address text taken from the section heading
            body: Section text up to the next heading or end of document

        Returns:
            PropertyRecord, or None when the section lacks the mandatory fields
        """
        pass
