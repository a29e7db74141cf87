"""Domain normalization helpers."""


def normalize_symbol(symbol: str | None) -> str | None:
    """Normalize ticker symbols.

    Args:
        symbol: Raw symbol value from a repository.

    Returns:
        str | None: Upper-cased symbol, or None when blank.
    """
    if not symbol:
        return None
    cleaned = symbol.strip()
    return cleaned.upper() if cleaned else None


def normalize_category(category: str | None, default: str) -> str:
    """Normalize category names, falling back to ``default`` when blank.

    Args:
        category: Raw category value from a repository.
        default: Category used for missing values.

    Returns:
        str: Stripped category name.
    """
    if not category:
        return default
    cleaned = category.strip()
    return cleaned or default


__all__ = ["normalize_symbol", "normalize_category"]
