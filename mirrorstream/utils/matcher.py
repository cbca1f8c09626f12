from typing import List, Optional

from mirrorstream.config.settings import settings
from mirrorstream.models.media import CanonicalMeta, Candidate
from mirrorstream.utils.helpers import normalize_title, parse_year
from mirrorstream.utils.logger import matcher_logger


# ===========================
# Canonical Year
# ===========================
def canonical_year(meta: CanonicalMeta) -> Optional[int]:
    return parse_year(meta.year) or parse_year(meta.release_info)


# ===========================
# Tier Predicates
# ===========================
def _years_agree(meta_year: Optional[int], candidate_year: Optional[int], tolerance: int) -> bool:
    if meta_year is None or candidate_year is None:
        return True
    return abs(candidate_year - meta_year) <= tolerance


def _fuzzy_accepts(meta_title: str, meta_year: Optional[int], candidate_title: str,
                   candidate_year: Optional[int], tolerance: int, max_length_diff: int) -> bool:
    if candidate_title not in meta_title and meta_title not in candidate_title:
        return False

    # Both years known: containment only counts with year agreement
    if meta_year is not None and candidate_year is not None:
        return abs(candidate_year - meta_year) <= tolerance

    return abs(len(candidate_title) - len(meta_title)) <= max_length_diff


# ===========================
# Best Match Selection
# ===========================
def find_best_match(
    meta: CanonicalMeta,
    candidates: Optional[List[Candidate]],
    year_tolerance: Optional[int] = None,
    max_length_diff: Optional[int] = None,
    fuzzy_min_length: Optional[int] = None
) -> Optional[Candidate]:
    if not candidates:
        return None

    if year_tolerance is None:
        year_tolerance = settings.MATCH_YEAR_TOLERANCE
    if max_length_diff is None:
        max_length_diff = settings.MATCH_MAX_LENGTH_DIFF
    if fuzzy_min_length is None:
        fuzzy_min_length = settings.MATCH_FUZZY_MIN_LENGTH

    meta_title = normalize_title(meta.name)
    if not meta_title:
        matcher_logger.debug(f"Unmatchable title: '{meta.name}'")
        return None

    meta_year = canonical_year(meta)

    normalized = [
        (candidate, normalize_title(candidate.title), parse_year(candidate.year))
        for candidate in candidates
    ]
    normalized = [entry for entry in normalized if entry[1]]

    for candidate, title, year in normalized:
        if title == meta_title and _years_agree(meta_year, year, year_tolerance):
            matcher_logger.debug(f"Exact match: '{candidate.title}' ({candidate.year}) [{candidate.id}]")
            return candidate

    for candidate, title, _ in normalized:
        if title == meta_title:
            matcher_logger.debug(f"Title-only match: '{candidate.title}' ({candidate.year}) [{candidate.id}]")
            return candidate

    if len(meta_title) < fuzzy_min_length:
        matcher_logger.debug(f"No exact match for short title '{meta.name}'")
        return None

    for candidate, title, year in normalized:
        if _fuzzy_accepts(meta_title, meta_year, title, year, year_tolerance, max_length_diff):
            matcher_logger.debug(f"Fuzzy match: '{candidate.title}' ({candidate.year}) [{candidate.id}]")
            return candidate

    matcher_logger.debug(f"No match for '{meta.name}' ({meta_year}) in {len(candidates)} candidates")
    return None
