"""
RequestContext management.
Use ContextVar to share the invocation ID with log records.
"""

import uuid
from contextvars import ContextVar, Token
from typing import Optional


# Context variable for the current invocation ID (UUID).
_invocation_id_var: ContextVar[Optional[str]] = ContextVar("invocation_id", default=None)


def get_invocation_id() -> Optional[str]:
    """Get the current invocation ID."""
    return _invocation_id_var.get()


def generate_invocation_id() -> str:
    """
    Generate and set a new invocation ID (UUID) for the current context.
    """
    new_id = str(uuid.uuid4())
    _invocation_id_var.set(new_id)
    return new_id


def clear_invocation_id() -> None:
    """Clear the invocation ID context."""
    _invocation_id_var.set(None)


def start_invocation() -> Token:
    """
    Set a new invocation ID and return the token that restores the previous one.
    """
    return _invocation_id_var.set(str(uuid.uuid4()))


def reset_invocation_id(token: Token) -> None:
    """Restore the invocation ID that was current before start_invocation()."""
    _invocation_id_var.reset(token)
