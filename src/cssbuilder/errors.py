"""Exception classes for cssbuilder.

Provides standardized exceptions for error handling throughout cssbuilder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.kinds import FragmentKind


class CSSBuilderError(Exception):
    """Base exception for all cssbuilder errors.
    
    Subclass this for specific error categories.
    """

    pass


class ValidationError(CSSBuilderError):
    """A selector fragment or combinator broke a grammar rule.
    
    Raised synchronously by the offending call. The fragment that
    triggered it is never appended, so the selector keeps the state
    it had before the call.
    """

    ORDER = "order"
    CARDINALITY = "cardinality"
    COMBINATOR = "combinator"
    VALUE = "value"

    def __init__(
        self,
        rule: str,
        message: str,
        kind: FragmentKind | None = None,
    ) -> None:
        """Initialize validation error.
        
        Args:
            rule: Which rule was violated ("order", "cardinality",
                "combinator" or "value")
            message: Description of the violation
            kind: Fragment kind being added when the rule failed
                (None for combinator errors)
        """
        self.rule = rule
        self.kind = kind
        self.message = message

        super().__init__(f"[{rule}] {message}")

    def __reduce__(self) -> tuple[type[ValidationError], tuple[str, str, FragmentKind | None]]:
        return (type(self), (self.rule, self.message, self.kind))


class SerializationError(CSSBuilderError, ValueError):
    """Error while restoring a selector from serialized data.
    
    Raised when a dict does not describe a selector (missing keys,
    unknown fragment kinds, mismatched lengths).
    """

    pass
