def normalize(text: str) -> str:
    """Case- and padding-insensitive form used for every comparison."""
    return text.strip().lower()
