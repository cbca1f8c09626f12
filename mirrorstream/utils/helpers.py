import re
from typing import Any, Dict, Iterable, Optional
from urllib.parse import quote_plus

# ===========================
# Patterns
# ===========================
NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9]")
YEAR_PATTERN = re.compile(r"\b(\d{4})\b")
LEADING_INT_PATTERN = re.compile(r"^\s*(\d+)")


# ===========================
# Title Normalization
# ===========================
def normalize_title(text: Optional[str]) -> str:
    if not text:
        return ""

    return NON_ALNUM_PATTERN.sub("", text.lower().strip())


# ===========================
# Year Parsing
# ===========================
def parse_year(value: Any) -> Optional[int]:
    if value is None:
        return None

    match = YEAR_PATTERN.search(str(value))
    if not match:
        return None
    return int(match.group(1))


# ===========================
# Integer Parsing
# ===========================
def parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    match = LEADING_INT_PATTERN.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def same_number(left: Any, right: Any) -> bool:
    left_number = parse_int(left)
    right_number = parse_int(right)
    if left_number is None or right_number is None:
        return False
    return left_number == right_number


# ===========================
# Flexible Field Lookup
# ===========================
def first_field(data: Dict[str, Any], fields: Iterable[str]) -> Any:
    for field in fields:
        value = data.get(field)
        if value not in (None, ""):
            return value
    return None


# ===========================
# URL Parameter Encoding
# ===========================
def quote_url_param(param: str) -> str:
    return quote_plus(param)
