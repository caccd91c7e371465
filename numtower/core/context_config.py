"""
Ambient decimal context configuration for numtower.

The engines and the dispatch layer never look up a rounding context on their
own; they take an optional ``context`` argument. This module is the
collaborator that holds the process-wide default callers pass in, with a
context manager for temporary changes. By default no context is installed,
so decimal arithmetic is exact.
"""

import logging
from typing import Optional, Union

from .context import Context, PRESETS, RoundingMode

logger = logging.getLogger(__name__)

ContextLike = Union[Context, str, None]


class MathContextConfig:
    """
    Global ambient-context configuration.

    Binding the context per thread or per task is the caller's concern;
    this class only stores a default.
    """

    _context: Optional[Context] = None

    @classmethod
    def resolve(cls, value: ContextLike) -> Optional[Context]:
        """
        Turn a context, preset name or ``None`` into a context.

        Args:
            value: Context, ``None``, or one of 'decimal32', 'decimal64',
                'decimal128', 'unlimited', 'basic_default'

        Raises:
            ValueError: If the value is not supported
        """
        if value is None or isinstance(value, Context):
            return value
        if isinstance(value, str):
            if value not in PRESETS:
                raise ValueError(f"Unsupported math context: {value}")
            return PRESETS[value]
        raise ValueError(f"Invalid math context: {value!r}")

    @classmethod
    def set_context(cls, value: ContextLike) -> None:
        """Install the ambient context (``None`` for exact arithmetic)."""
        cls._context = cls.resolve(value)
        logger.debug("ambient math context set to %s", cls._context)

    @classmethod
    def get_context(cls) -> Optional[Context]:
        """Get the ambient context, or ``None`` when none is installed."""
        return cls._context

    @classmethod
    def clear_context(cls) -> None:
        cls.set_context(None)

    @classmethod
    def get_precision(cls) -> int:
        """Precision of the ambient context (0 when unlimited or absent)."""
        return cls._context.precision if cls._context is not None else 0

    @classmethod
    def get_rounding_mode(cls) -> Optional[RoundingMode]:
        return cls._context.rounding_mode if cls._context is not None else None


def ambient_context() -> Optional[Context]:
    """Shortcut for ``MathContextConfig.get_context()``."""
    return MathContextConfig.get_context()


# Context manager for temporary context changes
class math_context:
    """
    Context manager for temporary ambient-context changes.

    Example:
        with math_context('decimal32'):
            q = divide(a, b, context=ambient_context())
        # Back to the previous context
    """

    def __init__(self, value: ContextLike):
        self.new_context = MathContextConfig.resolve(value)
        self.old_context = None

    def __enter__(self):
        self.old_context = MathContextConfig.get_context()
        MathContextConfig.set_context(self.new_context)
        return self.new_context

    def __exit__(self, _exc_type, _exc_val, _exc_tb):
        MathContextConfig.set_context(self.old_context)
