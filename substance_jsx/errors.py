"""Custom error types for substance-jsx."""


class SubstanceJSXError(Exception):
    """Base error for all substance-jsx errors."""
    pass


class MissingBuilderError(SubstanceJSXError, TypeError):
    """Raised when no host builder was injected and props carry none."""

    def __init__(self, element, builder_key: str = "$$"):
        name = element if isinstance(element, str) else getattr(element, "__name__", repr(element))
        super().__init__(
            f"No builder available to create '{name}'. "
            f"Pass one explicitly or set props['{builder_key}']."
        )


class RuleConflictError(SubstanceJSXError, ValueError):
    """Raised when a rename rule would claim a key owned by another category."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Key '{key}' {reason}")


class TreeFormatError(SubstanceJSXError, ValueError):
    """Raised when a JSON tree description cannot be read."""
    pass
