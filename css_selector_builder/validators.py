from typing import Dict, Any, Union
from dataclasses import dataclass
import logging

from lxml import html, etree
import cssselect

from .builder import SelectorBuilder
from .exceptions import InvalidSelectorError, InvalidHTMLError
from .utils import (
    normalize_selector,
    get_selector_specificity,
    is_valid_html_content
)

logger = logging.getLogger(__name__)

SelectorLike = Union[SelectorBuilder, str]

@dataclass
class SelectorInfo:
    raw_selector: str
    processed_selector: str
    is_valid: bool
    validation_message: str = ""
    specificity: tuple = (0, 0, 0)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "processed": self.processed_selector,
            "is_valid": self.is_valid,
            "message": self.validation_message,
            "specificity": self.specificity
        }

class SelectorValidator:
    """Checks built selectors with cssselect and matches them against HTML."""

    def validate(self, selector: SelectorLike) -> SelectorInfo:
        """
        Check that a built selector is valid CSS.

        Args:
            selector: A SelectorBuilder or an already stringified selector

        Returns:
            SelectorInfo describing the selector

        Raises:
            InvalidSelectorError: If the selector is empty or not valid CSS
        """
        raw = str(selector) if selector is not None else ""
        if not raw.strip():
            raise InvalidSelectorError("Empty or invalid selector")

        processed = normalize_selector(raw)
        try:
            cssselect.parse(processed)
        except cssselect.SelectorSyntaxError as e:
            logger.debug(f"Selector {raw!r} failed to parse: {e}")
            raise InvalidSelectorError(f"Invalid CSS selector: {str(e)}")

        return SelectorInfo(
            raw_selector=raw,
            processed_selector=processed,
            is_valid=True,
            specificity=get_selector_specificity(processed)
        )

    def process_selectors(self, selectors: Dict[str, SelectorLike]) -> Dict[str, Any]:
        """Validate a mapping of named selectors without raising."""
        result = {
            "selectors": {},
            "processed_selectors": {},
            "all_valid": True
        }

        for field, selector in selectors.items():
            raw = str(selector)
            result["selectors"][field] = raw
            try:
                info = self.validate(selector)
                result["processed_selectors"][field] = info.as_dict()
            except InvalidSelectorError as e:
                result["processed_selectors"][field] = SelectorInfo(
                    raw_selector=raw,
                    processed_selector=raw,
                    is_valid=False,
                    validation_message=str(e)
                ).as_dict()
                result["all_valid"] = False

        return result

    def validate_html_content(
        self,
        html_content: str,
        selectors: Dict[str, SelectorLike]
    ) -> Dict[str, bool]:
        """
        Report whether each selector matches at least one element.

        Selectors that cannot be translated to XPath, such as those ending in
        a pseudo-element, never match.

        Raises:
            InvalidHTMLError: If the content is not HTML
        """
        if not is_valid_html_content(html_content):
            raise InvalidHTMLError("Invalid HTML content")

        try:
            tree = html.fromstring(html_content)
        except (etree.ParserError, etree.XMLSyntaxError) as e:
            raise InvalidHTMLError(f"Error parsing HTML: {str(e)}")

        results = {}
        for field, selector in selectors.items():
            processed = normalize_selector(str(selector))
            if not processed:
                results[field] = False
                continue
            try:
                results[field] = len(tree.cssselect(processed)) > 0
            except (cssselect.SelectorError, cssselect.ExpressionError) as e:
                logger.debug(f"Cannot match {processed!r} against HTML: {e}")
                results[field] = False

        return results
