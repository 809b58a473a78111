"""Registry of selectable pattern primitives.

Primitives register themselves by name with ``@register_primitive``; the
composer only ever looks them up here.
"""

from .base import BasePrimitive
from .errors import InvalidArgument

PRIMITIVES: dict[str, type[BasePrimitive]] = {}


def register_primitive(cls: type[BasePrimitive]) -> type[BasePrimitive]:
    """Class decorator adding a primitive under its ``name``.

    Raises:
        ValueError: If another class already uses the same name.
    """
    existing = PRIMITIVES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Primitive name already registered: {cls.name}")
    PRIMITIVES[cls.name] = cls
    return cls


def get_primitive(name: str, **kwargs) -> BasePrimitive:
    """Create a primitive instance by name.

    Args:
        name: Registered primitive name (e.g., "star_burst").
        **kwargs: Options passed to the primitive's constructor.

    Returns:
        Initialized primitive instance.

    Raises:
        InvalidArgument: If name is not registered.
    """
    if name not in PRIMITIVES:
        available = ", ".join(PRIMITIVES.keys())
        raise InvalidArgument(f"Unknown primitive: {name}. Available: {available}")
    return PRIMITIVES[name](**kwargs)


def primitive_names() -> list[str]:
    """Registered primitive names in registration order."""
    return list(PRIMITIVES.keys())
