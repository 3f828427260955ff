from ..core import BASELINE_TAG


def normalize_tags(raw: str) -> list[str]:
    """
    Baseline tag followed by the comma separated user tags, as declared.
    Elements are neither trimmed nor filtered.
    """
    tags = [BASELINE_TAG]
    if raw:
        tags.extend(raw.split(","))
    return tags
