"""Utility functions specific to Confluence operations."""


def escape_cql_string(value: str) -> str:
    """Escape a value for use inside a double-quoted CQL string literal.

    Backslashes are escaped first, then double quotes, so that user text such
    as ``say "hi"`` cannot terminate the literal early.

    Args:
        value: Raw text to embed in the literal.

    Returns:
        The escaped text, without surrounding quotes.
    """
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_space_text_cql(space_key: str, query: str) -> str:
    """Build a CQL expression matching free text inside a single space.

    >>> build_space_text_cql("SD", "release notes")
    'space="SD" and text ~ "release notes"'
    """
    return (
        f'space="{escape_cql_string(space_key)}" '
        f'and text ~ "{escape_cql_string(query)}"'
    )
