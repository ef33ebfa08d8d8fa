"""
cssbuilder — Validated CSS selector builder for Python

Build CSS selector strings with chained calls. Fragment order and
cardinality are checked as you go, so invalid compound selectors fail at
the call that broke them instead of at match time.

Quick Start:
    >>> from cssbuilder import css_selector_builder as builder
    >>> builder.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'

    >>> builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'

    >>> builder.combine(
    ...     builder.element("div").id("main"),
    ...     "~",
    ...     builder.element("table").id("data"),
    ... ).stringify()
    'div#main ~ table#data'

Rules:
    element#id.class[attr]:pseudo-class::pseudo-element
    - parts must appear in that order
    - element, id and pseudo-element at most once
    - violations raise cssbuilder.ValidationError

Installation:
    pip install cssbuilder              # Zero runtime dependencies
"""

from cssbuilder.config import (
    BuildConfig,
    build_config_context,
    get_build_config,
    reset_build_config,
    set_build_config,
)
from cssbuilder.errors import CSSBuilderError, SerializationError, ValidationError
from cssbuilder.facade import SelectorBuilder, css_selector_builder
from cssbuilder.kinds import Combinator, FragmentKind
from cssbuilder.protocols import Stringifiable
from cssbuilder.selector import Selector
from cssbuilder.serialization import from_dict, from_json, to_dict, to_json
from cssbuilder.shapes import Rectangle

__version__ = "0.1.0"

# Module-level shortcuts onto the shared facade
element = css_selector_builder.element
id = css_selector_builder.id  # noqa: A001
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Facade
    "css_selector_builder",
    "SelectorBuilder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # Builder
    "Selector",
    "Stringifiable",
    "FragmentKind",
    "Combinator",
    # Errors
    "CSSBuilderError",
    "ValidationError",
    "SerializationError",
    # Configuration
    "BuildConfig",
    "get_build_config",
    "set_build_config",
    "reset_build_config",
    "build_config_context",
    # Serialization
    "to_json",
    "from_json",
    "to_dict",
    "from_dict",
    # Shapes
    "Rectangle",
]
