"""Single accessor for the process environment."""

import os


def read_environment() -> list[tuple[str, str]]:
    """
    Snapshot the process environment as a list of (key, value) pairs.

    Returns:
        The current contents of ``os.environ``
    """
    return list(os.environ.items())
