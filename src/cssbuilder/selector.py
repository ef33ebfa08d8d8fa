"""Selector — chainable CSS compound selector builder.

Fragments are appended in call order and joined once in stringify().
Every fragment call is validated against two rules before anything is
appended:

Ordering:
    Kinds must follow element, id, class, attribute, pseudo-class,
    pseudo-element. Adding a kind fails if any kind later in that order
    is already present.

Cardinality:
    element, id and pseudo-element may each occur once.

A failing call raises ValidationError and leaves the selector untouched.

The state is effectively the furthest canonical kind reached so far; it
never moves backwards, and pseudo-element is terminal.

Example:
    >>> Selector(FragmentKind.ID, "main").class_("container").class_("editable").stringify()
    '#main.container.editable'

Thread Safety:
    Selector instances are owned by the chain that built them.
    No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable

from cssbuilder.config import get_build_config
from cssbuilder.errors import ValidationError
from cssbuilder.kinds import CANONICAL_ORDER, FragmentKind

# Counter slot per kind, in declaration order
_SLOTS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(FragmentKind)}

_ORDER_HINT = "element, id, class, attribute, pseudo-class, pseudo-element"


class Selector:
    """A compound selector under construction.

    Usually created through the facade (``css_selector_builder.element("a")``)
    rather than directly. All fragment methods return ``self``.

    """

    __slots__ = ("_counts", "_fragments")

    def __init__(self, kind: FragmentKind | None = None, value: str | None = None) -> None:
        """Create a selector, optionally seeded with one fragment.

        Args:
            kind: Kind of the seed fragment (None for an empty selector)
            value: Raw value of the seed fragment; for COMBINED this is the
                already rendered text

        Raises:
            ValidationError: If the seed value is rejected by the active config
        """
        self._fragments: list[str] = []
        self._counts: list[int] = [0] * len(_SLOTS)
        if kind is not None:
            self._add(kind, "" if value is None else value)

    @classmethod
    def restore(cls, fragments: Iterable[str], counts: dict[FragmentKind, int]) -> Selector:
        """Rebuild a selector from previously captured state, without validation."""
        selector = cls()
        selector._fragments.extend(fragments)
        for kind, count in counts.items():
            selector._counts[_SLOTS[kind]] = count
        return selector

    # =========================================================================
    # Fragment methods
    # =========================================================================

    def element(self, value: str) -> Selector:
        """Append a type selector (``div``)."""
        return self._add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        """Append an id selector (``#value``)."""
        return self._add(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        """Append a class selector (``.value``)."""
        return self._add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append an attribute selector.

        Args:
            value: Bracket contents without the brackets, e.g. ``href$=".png"``
        """
        return self._add(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        """Append a pseudo-class (``:value``)."""
        return self._add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        """Append a pseudo-element (``::value``). Nothing may follow it."""
        return self._add(FragmentKind.PSEUDO_ELEMENT, value)

    # =========================================================================
    # Rendering and inspection
    # =========================================================================

    def stringify(self) -> str:
        """Join all fragments in insertion order, without separators."""
        return "".join(self._fragments)

    @property
    def fragments(self) -> tuple[str, ...]:
        """Rendered fragments in insertion order."""
        return tuple(self._fragments)

    @property
    def furthest_kind(self) -> FragmentKind | None:
        """Furthest canonical kind added so far (None if there is none)."""
        for kind in reversed(CANONICAL_ORDER):
            if self._counts[_SLOTS[kind]]:
                return kind
        return None

    def count(self, kind: FragmentKind) -> int:
        """Number of fragments of ``kind`` added so far."""
        return self._counts[_SLOTS[kind]]

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"

    def __len__(self) -> int:
        """Return number of fragments (not text length)."""
        return len(self._fragments)

    # =========================================================================
    # Validation
    # =========================================================================

    def _add(self, kind: FragmentKind, value: str) -> Selector:
        if kind is not FragmentKind.COMBINED:
            self._check_value(kind, value)
            self._check_order(kind)
            self._check_single(kind)
        self._fragments.append(kind.render(value))
        self._counts[_SLOTS[kind]] += 1
        return self

    def _check_value(self, kind: FragmentKind, value: str) -> None:
        if value == "" and get_build_config().reject_empty_values:
            raise ValidationError(
                ValidationError.VALUE,
                f"{kind.label} value must not be empty",
                kind,
            )

    def _check_order(self, kind: FragmentKind) -> None:
        for later in CANONICAL_ORDER[kind.position + 1 :]:
            if self._counts[_SLOTS[later]]:
                raise ValidationError(
                    ValidationError.ORDER,
                    f"{kind.label} cannot follow {later.label}; selector parts "
                    f"should be arranged in the following order: {_ORDER_HINT}",
                    kind,
                )

    def _check_single(self, kind: FragmentKind) -> None:
        if kind.single and self._counts[_SLOTS[kind]]:
            raise ValidationError(
                ValidationError.CARDINALITY,
                f"{kind.label} should not occur more than one time inside the selector",
                kind,
            )
