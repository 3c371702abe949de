"""
Controlled-vocabulary support.

Key components:
- CvTermCache: accession-indexed term table populated from OBO files
- CvTermDetails: a single cached term
"""

from .cache import LOAD_FAILED, CvTermCache
from .types import CvTermDetails

__all__ = ["CvTermCache", "CvTermDetails", "LOAD_FAILED"]
