"""Primary key generator for executions, subscriptions and variables (CUID2)."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string; used as default id of every table."""
    return str(_next_cuid())
