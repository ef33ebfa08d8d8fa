"""SelectorBuilder facade — the entry point for building selectors.

Each fragment method starts a fresh Selector seeded with that fragment;
further fragments are chained on the returned Selector. combine() joins
two finished selectors with a combinator into a new, opaque Selector.

Example:
    >>> builder = css_selector_builder
    >>> builder.combine(
    ...     builder.element("div").id("main"),
    ...     "~",
    ...     builder.element("table").id("data"),
    ... ).stringify()
    'div#main ~ table#data'

Thread Safety:
    The facade holds no state; css_selector_builder is safe to share.

"""

from __future__ import annotations

from cssbuilder.config import get_build_config
from cssbuilder.errors import ValidationError
from cssbuilder.kinds import COMBINATOR_SYMBOLS, Combinator, FragmentKind
from cssbuilder.protocols import Stringifiable
from cssbuilder.selector import Selector
from cssbuilder.utils.logger import get_logger

logger = get_logger(__name__)


def combinator_symbol(combinator: Combinator | str) -> str:
    """Resolve a combinator argument to the symbol that gets rendered.

    Args:
        combinator: A Combinator member or its symbol

    Returns:
        The symbol text

    Raises:
        ValidationError: If the token is not a string, or is not one of
            " ", "+", "~", ">" while strict_combinators is enabled
    """
    if isinstance(combinator, Combinator):
        return combinator.value
    if isinstance(combinator, str) and (
        combinator in COMBINATOR_SYMBOLS or not get_build_config().strict_combinators
    ):
        return combinator
    raise ValidationError(
        ValidationError.COMBINATOR,
        f"unsupported combinator {combinator!r}; expected one of ' ', '+', '~', '>'",
    )


class SelectorBuilder:
    """Stateless factory for Selector chains."""

    __slots__ = ()

    def element(self, value: str) -> Selector:
        return Selector(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return Selector(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return Selector(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return Selector(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: Stringifiable,
        combinator: Combinator | str,
        right: Stringifiable,
    ) -> Selector:
        """Join two selectors with a combinator.

        The operands are rendered immediately; the result holds only the
        combined text. Fragments chained onto the result are validated
        against each other, never against the operands' fragments.

        Args:
            left: Selector on the left of the combinator
            combinator: One of " ", "+", "~", ">" (or a Combinator member)
            right: Selector on the right of the combinator

        Returns:
            New Selector containing ``"<left> <combinator> <right>"``
        """
        symbol = combinator_symbol(combinator)
        text = f"{left.stringify()} {symbol} {right.stringify()}"
        logger.debug("Combined selectors with %r: %s", symbol, text)
        return Selector(FragmentKind.COMBINED, text)


css_selector_builder = SelectorBuilder()


__all__ = [
    "SelectorBuilder",
    "combinator_symbol",
    "css_selector_builder",
]
