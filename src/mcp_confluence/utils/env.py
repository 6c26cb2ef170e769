"""Environment variable utility functions for MCP Confluence."""

import os


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def getenv_with_fallback(*env_var_names: str, default: str | None = None) -> str | None:
    """Return the first non-empty value among several environment variables.

    Lets the canonical ``CONFLUENCE_*`` names take precedence over the older
    ``JIRA_*`` names that earlier deployments of this server used.

    Args:
        *env_var_names: Variable names, in order of precedence.
        default: Value returned when none of the variables is set.

    Returns:
        The first non-empty value found, otherwise ``default``.
    """
    for name in env_var_names:
        value = os.getenv(name)
        if value:
            return value
    return default
