"""
Logging context management using contextvars for automatic propagation.

Request handlers set the tenant (phone number ID) and the user (sender
WhatsApp ID) once per webhook delivery, e.g. from the decoded payload. Every
ContextLogger picks them up without manual parameter passing.
"""

from contextvars import ContextVar

_tenant_context: ContextVar[str | None] = ContextVar("tenant_id", default=None)
_user_context: ContextVar[str | None] = ContextVar("user_id", default=None)


def set_request_context(
    tenant_id: str | None = None,
    user_id: str | None = None,
) -> None:
    """
    Set the logging context for the current async context.

    Args:
        tenant_id: Business phone number ID
        user_id: WhatsApp user identifier
    """
    if tenant_id is not None:
        _tenant_context.set(tenant_id)
    if user_id is not None:
        _user_context.set(user_id)


def get_current_tenant_context() -> str | None:
    """Get the current tenant ID, or None if not set."""
    return _tenant_context.get()


def get_current_user_context() -> str | None:
    """Get the current user ID, or None if not set."""
    return _user_context.get()


def clear_request_context() -> None:
    """Reset both context variables."""
    _tenant_context.set(None)
    _user_context.set(None)
