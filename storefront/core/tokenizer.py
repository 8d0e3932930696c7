from typing import List, Optional

def tokenize(text: Optional[str]) -> List[str]:
    """Normalize free text into search tokens.

    Lower-cases, turns hyphens into spaces so that slugs like ``prayer-cards``
    line up with ``prayer cards``, and splits on whitespace runs.
    """
    if not text:
        return []
    return text.lower().replace("-", " ").split()

def split_words(text: Optional[str]) -> List[str]:
    # hyphens are kept; used for word overlap between two products
    if not text:
        return []
    return text.lower().split()
