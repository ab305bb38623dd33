"""
Custom exception hierarchy for field-sanitizer.

Every error the engine raises derives from ``SanitizerError`` so callers can
catch the whole family at once, or pick out a single kind (e.g.
``SanitizerNotFound`` during ``sanitize()``) when they need to react to it.

Exceptions raised *inside* a user-registered transformation are never
wrapped; they reach the caller unchanged.
"""


class SanitizerError(Exception):
    """Base exception for all field-sanitizer errors."""


class SanitizerNotCallable(SanitizerError):
    """Raised by ``register()`` when the callback cannot be invoked with one argument.

    Covers both non-callables (strings, ``None``, plain data) and callables
    whose signature cannot bind a single positional argument.
    """


class SanitizerAlreadyExists(SanitizerError):
    """Raised by ``register()`` when the name is already a custom sanitizer.

    Pass ``override=True`` to replace the existing entry instead.
    """


class SanitizerNotFound(SanitizerError):
    """Raised by ``sanitize()`` when a rule names an unknown transformation.

    The name was found neither in the custom registry nor in the built-in
    table.
    """


class ConfigValidationError(SanitizerError):
    """Raised when a rule-set YAML file is empty or otherwise unusable.

    Schema problems (wrong types, empty rule lists) surface as
    ``pydantic.ValidationError`` instead.
    """
