"""Text normalization applied to form input."""


def capitalize_first_letter(value: str) -> str:
    """Upper-case the first character, leave the rest as typed."""
    return value[:1].upper() + value[1:]
