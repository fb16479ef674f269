"""
Correlation ID context manager.

Manages correlation ID propagation across async boundaries using contextvars.

Dependencies: contextvars
System role: Request tracing across pipeline stages
"""

from contextvars import ContextVar, Token
import uuid

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        str: The correlation ID that was set
    """
    value = correlation_id or uuid.uuid4().hex
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """
    Get current correlation ID from context.

    Returns:
        str: Current correlation ID, empty string when unset
    """
    return correlation_id_ctx.get()


def bind_correlation_id() -> tuple[str, Token[str] | None]:
    """
    Reuse the caller's correlation ID or bind a fresh one for one request.

    Returns:
        tuple: (correlation ID, token to pass to reset_correlation_id).
            The token is None when the caller had already set an ID.
    """
    current = correlation_id_ctx.get()
    if current:
        return current, None
    value = uuid.uuid4().hex
    return value, correlation_id_ctx.set(value)


def reset_correlation_id(token: Token[str] | None) -> None:
    """Restore the ID that was active before bind_correlation_id."""
    if token is None:
        return
    try:
        correlation_id_ctx.reset(token)
    except ValueError:
        # Finalized outside the request's context; that context is gone.
        correlation_id_ctx.set("")


def clear_correlation_id() -> None:
    """Clear correlation ID from context."""
    correlation_id_ctx.set("")
