# mzqclib/ontology/cache.py
"""Accession-indexed cache of ontology terms read from OBO files."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..config import (
    FILE_ENCODING,
    OBO_COMMENT_PREFIX,
    OBO_TERM_STANZA,
    OBO_UNIT_RELATIONSHIP,
    OBO_VALUE_TYPE_PREFIX,
)
from ..errors import CacheLoadError
from .types import CvTermDetails

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Returned by load_from_obo_file when the source cannot be opened
LOAD_FAILED = -1


class CvTermCache:
    """
    Flat accession -> term table.

    Parents are stored as links only; the cache does not resolve them or
    check that they exist. Each instance owns its own table, so threads
    that load ontologies concurrently must use separate instances.
    """

    def __init__(self):
        self.current_obo_file: Optional[str] = None
        self._terms: Dict[str, CvTermDetails] = {}

    def load_from_obo_file(self, filename: PathLike) -> int:
        """
        Parse an OBO file into the cache.

        Args:
            filename: Path of the OBO file.

        Returns:
            Number of terms in the cache, or LOAD_FAILED (-1) if the file
            could not be opened.
        """
        try:
            return self.load(filename)
        except CacheLoadError as e:
            logger.error(str(e))
            return LOAD_FAILED

    def load(self, filename: PathLike) -> int:
        """
        Parse an OBO file into the cache.

        Bytes that are not valid UTF-8 are replaced with U+FFFD rather than
        failing the load.

        Raises:
            CacheLoadError: If the file cannot be opened.
        """
        self.current_obo_file = str(filename)
        try:
            with open(filename, "r", encoding=FILE_ENCODING, errors="replace") as f:
                count = self.parse_obo_lines(f)
        except OSError as e:
            raise CacheLoadError(
                f"Could not open ontology file {filename}: {e}", str(filename)
            ) from e
        logger.debug(f"Cached {count} terms from {filename}")
        return count

    def parse_obo_lines(self, lines: Iterable[str]) -> int:
        """
        Parse OBO content line by line.

        Only [Term] stanzas are cached. Any other stanza header closes the
        current term, and lines outside a term (the OBO header, typedefs)
        are ignored. A term is committed when the next stanza starts or the
        input ends, provided it has an accession.

        Terms only reach the cache once the whole input has been read, so
        a failing iterable leaves the cache unchanged.

        Args:
            lines: Iterable of text lines, e.g. an open file.

        Returns:
            Number of terms in the cache after parsing.
        """
        parsed: Dict[str, CvTermDetails] = {}
        current: Optional[CvTermDetails] = None

        for raw_line in lines:
            line = raw_line.rstrip("\r\n")
            if not line.strip() or line.startswith(OBO_COMMENT_PREFIX):
                continue

            if line.startswith("["):
                self._commit(parsed, current)
                current = CvTermDetails() if line.strip() == OBO_TERM_STANZA else None
                continue

            if current is None:
                continue

            self._apply_tag(current, line)

        self._commit(parsed, current)
        self._terms.update(parsed)
        return len(self._terms)

    @staticmethod
    def _apply_tag(term: CvTermDetails, line: str) -> None:
        tag, sep, content = line.partition(":")
        if not sep:
            return
        content = content.strip()

        if tag == "id":
            term.accession = content
        elif tag == "name":
            term.name = content
        elif tag == "def":
            term.definition = content
        elif tag == "is_a":
            term.parent_terms.append(content)
        elif tag == "relationship":
            term.relationships.append(content)
            relation, _, target = content.partition(" ")
            if relation == OBO_UNIT_RELATIONSHIP and target:
                term.unit = target.split(OBO_COMMENT_PREFIX, 1)[0].strip()
        elif tag == "xref" and content.startswith(OBO_VALUE_TYPE_PREFIX):
            # e.g. xref: value-type:xsd\:double "The allowed value-type for this CV term."
            value_type = content[len(OBO_VALUE_TYPE_PREFIX):].split(" ", 1)[0]
            term.value_type = value_type.replace("\\:", ":")

    @staticmethod
    def _commit(
        parsed: Dict[str, CvTermDetails], term: Optional[CvTermDetails]
    ) -> None:
        if term is not None and term.accession:
            parsed[term.accession] = term

    def get_term(self, accession: str) -> Optional[CvTermDetails]:
        return self._terms.get(accession)

    @property
    def terms(self) -> Dict[str, CvTermDetails]:
        return dict(self._terms)

    def unknown_accessions(self, accessions: Iterable[str]) -> List[str]:
        """Return the accessions not present in the cache, keeping input order."""
        unknown: List[str] = []
        for accession in accessions:
            if accession not in self._terms and accession not in unknown:
                unknown.append(accession)
        return unknown

    def clear(self) -> None:
        self._terms.clear()
        self.current_obo_file = None

    def __contains__(self, accession: str) -> bool:
        return accession in self._terms

    def __len__(self) -> int:
        return len(self._terms)
