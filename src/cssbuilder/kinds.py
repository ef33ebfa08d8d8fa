"""FragmentKind and Combinator definitions for the selector builder.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Each piece is a fragment of one FragmentKind. Kinds must appear in the
canonical order above; ELEMENT, ID and PSEUDO_ELEMENT at most once.

COMBINED is the kind of the pre-rendered text produced by combining two
selectors. It sits outside the canonical order and never blocks later
fragments.

Thread Safety:
FragmentKind and Combinator are enums (inherently immutable).
The lookup tables are frozen.

"""

from enum import Enum, auto


class FragmentKind(Enum):
    """Kinds of selector fragments, declared in canonical order."""

    ELEMENT = auto()  # div
    ID = auto()  # #main
    CLASS = auto()  # .container
    ATTRIBUTE = auto()  # [href$=".png"]
    PSEUDO_CLASS = auto()  # :focus
    PSEUDO_ELEMENT = auto()  # ::before

    # Result of combine(); opaque
    COMBINED = auto()

    @property
    def position(self) -> int:
        """Index in CANONICAL_ORDER, or -1 for kinds outside it."""
        return _POSITIONS.get(self, -1)

    @property
    def single(self) -> bool:
        """Whether the kind may occur at most once per selector."""
        return self in SINGLE_OCCURRENCE

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        """Wrap a raw value in this kind's prefix and suffix.

        >>> FragmentKind.ATTRIBUTE.render('href$=".png"')
        '[href$=".png"]'
        """
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


class Combinator(Enum):
    """The four combinator tokens accepted by combine()."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


CANONICAL_ORDER: tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

SINGLE_OCCURRENCE: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

COMBINATOR_SYMBOLS: frozenset[str] = frozenset(c.value for c in Combinator)

_POSITIONS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(CANONICAL_ORDER)}

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
    FragmentKind.COMBINED: ("", ""),
}


__all__ = [
    "CANONICAL_ORDER",
    "COMBINATOR_SYMBOLS",
    "SINGLE_OCCURRENCE",
    "Combinator",
    "FragmentKind",
]
