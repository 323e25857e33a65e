"""Utilities for splitting a full name into its namespace and short name."""


def namespace_of(full_name: str) -> str:
    """Return the dotted prefix of a full name, or an empty string."""
    index = full_name.rfind(".")
    if index < 0:
        return ""
    return full_name[:index]


def short_name_of(full_name: str) -> str:
    """Return the trailing identifier of a full name."""
    return full_name[full_name.rfind(".") + 1 :]
