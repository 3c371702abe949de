# mzqclib/ontology/types.py
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import OBO_COMMENT_PREFIX


@dataclass
class CvTermDetails:
    """
    A single ontology term as read from an OBO source.

    parent_terms and relationships keep the raw text of their lines
    (e.g. "MS:1000001 ! sample number"); use parent_accessions for the bare
    accessions.
    """

    accession: str = ""
    name: str = ""
    definition: str = ""
    relationships: List[str] = field(default_factory=list)
    parent_terms: List[str] = field(default_factory=list)
    value_type: Optional[str] = None
    unit: Optional[str] = None

    @property
    def parent_accessions(self) -> List[str]:
        """Parent term accessions with trailing OBO comments removed."""
        return [
            parent.split(OBO_COMMENT_PREFIX, 1)[0].strip()
            for parent in self.parent_terms
        ]
