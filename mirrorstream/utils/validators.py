import re
from typing import Dict, Optional

# ===========================
# Identifier Patterns
# ===========================
IMDB_ID_PATTERN = re.compile(r"^tt\d+$")


# ===========================
# External Identifier Detection
# ===========================
def is_external_id(content_id: Optional[str]) -> bool:
    if not content_id:
        return False
    return bool(IMDB_ID_PATTERN.match(content_id))


# ===========================
# Media Info Extraction
# ===========================
def extract_media_info(content_id: str) -> Dict[str, Optional[str]]:
    content_id_formatted = content_id.replace(".json", "").strip()
    parts = content_id_formatted.split(":")

    return {
        "content_id": parts[0],
        "season": (parts[1] or None) if len(parts) > 1 else None,
        "episode": (parts[2] or None) if len(parts) > 2 else None
    }
