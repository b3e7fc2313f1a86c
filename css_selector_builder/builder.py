from enum import IntEnum
from typing import List, Optional
import logging

from .exceptions import DuplicateError, OrderError, CombinedSelectorError
from .models import SelectorSpec

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
COMBINED_MESSAGE = "Combined selectors can only be stringified"

class SelectorPart(IntEnum):
    """Selector part kinds in canonical CSS order."""
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

SINGLETON_PARTS = {SelectorPart.ELEMENT, SelectorPart.ID, SelectorPart.PSEUDO_ELEMENT}

class SelectorBuilder:
    """
    Fluent builder for a single CSS selector.

    Each mutator returns the builder itself so calls can be chained:

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may be set
    only once. A builder produced by ``combine`` can only be stringified.
    """

    def __init__(self):
        self.element_name: Optional[str] = None
        self.id_name: Optional[str] = None
        self.classes: List[str] = []
        self.attributes: List[str] = []
        self.pseudo_classes: List[str] = []
        self.pseudo_element_name: Optional[str] = None
        self.combined: Optional[str] = None
        self.last_part: Optional[SelectorPart] = None

    @property
    def is_combined(self) -> bool:
        return self.combined is not None

    def _advance(self, part: SelectorPart) -> None:
        """Move the order pointer to ``part`` or raise if the move is illegal."""
        if self.is_combined:
            logger.debug(f"Rejected {part.name} on combined selector {self.combined!r}")
            raise CombinedSelectorError(COMBINED_MESSAGE)

        if self.last_part is not None and self.last_part > part:
            logger.debug(f"Rejected {part.name} after {self.last_part.name}")
            raise OrderError(ORDER_MESSAGE)

        if part in SINGLETON_PARTS and self.last_part == part:
            logger.debug(f"Rejected duplicate {part.name}")
            raise DuplicateError(DUPLICATE_MESSAGE)

        self.last_part = part

    def element(self, value: str) -> "SelectorBuilder":
        self._advance(SelectorPart.ELEMENT)
        self.element_name = value
        return self

    def id(self, value: str) -> "SelectorBuilder":
        self._advance(SelectorPart.ID)
        self.id_name = value
        return self

    def class_(self, value: str) -> "SelectorBuilder":
        self._advance(SelectorPart.CLASS)
        self.classes.append(value)
        return self

    def attr(self, value: str) -> "SelectorBuilder":
        """Add an attribute part; ``value`` is the text between the brackets."""
        self._advance(SelectorPart.ATTRIBUTE)
        self.attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        self._advance(SelectorPart.PSEUDO_CLASS)
        self.pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        self._advance(SelectorPart.PSEUDO_ELEMENT)
        self.pseudo_element_name = value
        return self

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    def combine(
        self,
        first: "SelectorBuilder",
        combinator: str,
        second: "SelectorBuilder"
    ) -> "SelectorBuilder":
        """
        Turn this builder into ``first <combinator> second``.

        Args:
            first: Left-hand selector
            combinator: Inserted verbatim, usually one of ' ', '+', '~', '>'
            second: Right-hand selector

        Returns:
            This builder, which from now on only supports stringify()
        """
        if self.is_combined:
            raise CombinedSelectorError(COMBINED_MESSAGE)
        if self.last_part is not None:
            raise CombinedSelectorError("Only an empty selector can hold a combination")
        self.combined = f"{first.stringify()} {combinator} {second.stringify()}"
        return self

    def stringify(self) -> str:
        if self.is_combined:
            return self.combined

        parts = [self.element_name or ""]
        if self.id_name:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f"[{value}]" for value in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def to_spec(self) -> SelectorSpec:
        """Snapshot the parts of a simple selector as a SelectorSpec."""
        if self.is_combined:
            raise CombinedSelectorError(COMBINED_MESSAGE)
        return SelectorSpec(
            element=self.element_name,
            id=self.id_name,
            classes=list(self.classes),
            attributes=list(self.attributes),
            pseudo_classes=list(self.pseudo_classes),
            pseudo_element=self.pseudo_element_name
        )

    @classmethod
    def from_spec(cls, spec: SelectorSpec) -> "SelectorBuilder":
        builder = cls()
        if spec.element is not None:
            builder.element(spec.element)
        if spec.id is not None:
            builder.id(spec.id)
        for name in spec.classes:
            builder.class_(name)
        for value in spec.attributes:
            builder.attr(value)
        for name in spec.pseudo_classes:
            builder.pseudo_class(name)
        if spec.pseudo_element is not None:
            builder.pseudo_element(spec.pseudo_element)
        return builder

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

class CssSelectorBuilder:
    """Facade: every call starts a new SelectorBuilder."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    def combine(
        self,
        first: SelectorBuilder,
        combinator: str,
        second: SelectorBuilder
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(first, combinator, second)

css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
