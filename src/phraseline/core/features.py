"""Character n-gram feature templates and codepoint-safe substring extraction."""

from typing import List, Tuple

# (group, start offset, end offset) relative to the candidate boundary i,
# each selecting sentence[i + start : i + end]
FEATURE_TEMPLATES: Tuple[Tuple[str, int, int], ...] = (
    ("UW1", -3, -2),
    ("UW2", -2, -1),
    ("UW3", -1, 0),
    ("UW4", 0, 1),
    ("UW5", 1, 2),
    ("UW6", 2, 3),
    ("BW1", -2, 0),
    ("BW2", -1, 1),
    ("BW3", 0, 2),
    ("TW1", -3, 0),
    ("TW2", -2, 1),
    ("TW3", -1, 2),
    ("TW4", 0, 3),
)

FEATURE_GROUPS: Tuple[str, ...] = tuple(group for group, _, _ in FEATURE_TEMPLATES)

# n-gram width expected for each group
GROUP_WIDTHS = {group: end - start for group, start, end in FEATURE_TEMPLATES}

def substring(text: str, start: int, end: int) -> str:
    """
    Slice text by codepoint offsets, clamping both ends to the string.

    Negative offsets never wrap around to the end of the string; they clamp
    to 0. Offsets past the end clamp to len(text).

    Args:
        text: Source string
        start: Inclusive start offset (may be negative)
        end: Exclusive end offset (may exceed the length)

    Returns:
        str: The clamped slice, or "" when the clamped range is empty
    """
    length = len(text)
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    if start >= end:
        return ""
    return text[start:end]

def extract_features(sentence: str, position: int) -> List[Tuple[str, str]]:
    """
    Collect the (group, n-gram) pairs evaluated at a candidate boundary.

    Args:
        sentence: Input sentence
        position: Candidate boundary, between sentence[position - 1] and sentence[position]

    Returns:
        List[Tuple[str, str]]: One pair per feature template; n-grams cut off
        by either edge of the sentence come back as ""
    """
    return [
        (group, substring(sentence, position + start, position + end))
        for group, start, end in FEATURE_TEMPLATES
    ]
