"""
Ошибки проверки аргументов для типов значений SVG.

Все исключения — нарушения предусловий вызова: они поднимаются до
создания любого значения и никогда не перехватываются внутри пакета.
"""

from typing import Any, Optional


class SVGValueError(ValueError):
    """Base class for all argument-validation failures of svg_values."""


class NullArgumentError(SVGValueError):
    """A required argument (or sequence element) is None."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        message = f"Argument '{name}' is None" if name else "Argument is None"
        super().__init__(message)


class EmptyArgumentError(SVGValueError):
    """A required string argument is empty."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        message = f"Argument '{name}' is empty" if name else "Argument is empty"
        super().__init__(message)


class EmptyColorNameError(EmptyArgumentError):
    """A color was requested by an empty name."""


class EmptyPaintValueError(EmptyArgumentError):
    """A paint was requested with an empty value."""


class UnitMismatchError(SVGValueError):
    """Arithmetic was requested over measurements with different units."""

    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid unit: {actual!r} (expected {expected!r})")


class UnknownUnitError(SVGValueError):
    """No unit matches the given identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown unit: {identifier!r}")


class UnconvertibleUnitError(SVGValueError):
    """The measurement is not a physical length and cannot be converted."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"Cannot convert {source} to {target}")


def require_not_null(value: Any, name: str) -> Any:
    """Return value unchanged, or raise NullArgumentError if it is None."""
    if value is None:
        raise NullArgumentError(name)
    return value


def require_not_empty(value: Optional[str], name: str, error=EmptyArgumentError) -> str:
    """Return a non-empty string unchanged.

    Args:
        value: string to check
        name: argument name for the error message
        error: EmptyArgumentError subclass raised for ""

    Raises:
        NullArgumentError: value is None
        TypeError: value is not a str
        EmptyArgumentError: value is empty (or the given subclass)
    """
    if value is None:
        raise NullArgumentError(name)
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if not value:
        raise error(name)
    return value
