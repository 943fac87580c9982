"""
Helpers for the tagged unions used throughout the schemas.

Every union is a Pydantic ``Annotated[A | B | ..., Discriminator(...)]`` with
a callable discriminator. Tags are namespaced (``"message:text"``) so they can
never be mistaken for payload keys when error locations are projected back
onto the payload.
"""

from collections.abc import Callable, Iterable
from typing import Any

from pydantic import Discriminator

from wacloud.schemas.core.errors import UNKNOWN_VARIANT_ERROR, unknown_variant_message


def union_tag(namespace: str, value: str) -> str:
    """Build the tag string for one union member."""
    return f"{namespace}:{value}"


def read_discriminator(value: Any, field: str) -> Any:
    """Read a discriminator from raw input (dict) or from a model instance."""
    if isinstance(value, dict):
        return value.get(field)
    return getattr(value, field, None)


def tag_resolver(
    field: str,
    namespace: str,
    known: Iterable[str],
    fallback: str | None = None,
) -> Callable[[Any], str | None]:
    """
    Build a callable discriminator for ``field``.

    Args:
        field: Name of the discriminator key
        namespace: Tag namespace of the union
        known: Discriminator values that have their own member
        fallback: Value whose member receives absent or unknown discriminators;
            without it, those inputs fail the union

    Returns:
        Function mapping an input to a member tag, or None when no member applies
    """
    known_values = frozenset(known)

    def resolve(value: Any) -> str | None:
        kind = read_discriminator(value, field)
        if isinstance(kind, str) and kind in known_values:
            return union_tag(namespace, kind)
        if fallback is not None:
            return union_tag(namespace, fallback)
        return None

    resolve.__name__ = f"resolve_{namespace}_{field}"
    return resolve


def strict_discriminator(
    resolver: Callable[[Any], str | None], field: str, label: str
) -> Discriminator:
    """
    Wrap a resolver so unknown or absent values raise ``unknown_union_variant``.

    The message is registered with its key so that error reporting can point
    at the discriminator itself, and report an absent key as a missing field.
    No error context is attached: ``Annotated`` metadata is hashed when the
    union is used in ``X | None`` or as a generic argument.
    """
    return Discriminator(
        resolver,
        custom_error_type=UNKNOWN_VARIANT_ERROR,
        custom_error_message=unknown_variant_message(label, field),
    )
