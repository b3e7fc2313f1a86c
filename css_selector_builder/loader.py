from typing import Dict, Optional, Union, Any, Tuple
import json
from pathlib import Path
import logging
from seleniumbase import SB
import tempfile
import os

from pydantic import ValidationError as PydanticValidationError
from .builder import SelectorBuilder
from .exceptions import ParseError, InvalidHTMLError, SelectorBuildError, ValidationError
from .models import SelectorSpec
from .validators import SelectorValidator
from .utils import (
    load_json_data,
    is_valid_file_path,
    merge_selector_results,
    is_valid_html_content
)

logger = logging.getLogger(__name__)

SelectorData = Union[str, Path, Dict[str, Any]]

class SelectorLoader:
    """Builds named selectors from JSON definitions and checks them."""

    def __init__(self, validator: Optional[SelectorValidator] = None):
        self.validator = validator or SelectorValidator()

    def load(self, data: SelectorData) -> Dict[str, SelectorBuilder]:
        """
        Build selectors from a JSON string, a JSON file or a dictionary.

        Each entry maps a name to a SelectorSpec-shaped object, e.g.
        ``{"title": {"element": "h1", "classes": ["title"]}}``.

        Raises:
            ParseError: If the input is not valid JSON, has unknown fields,
                or describes parts in an illegal order
        """
        if isinstance(data, dict):
            return self._build_selectors(data)
        if isinstance(data, Path) or is_valid_file_path(data):
            return self.load_json_file(data)
        return self.load_json_string(str(data))

    def load_json_string(self, json_string: str) -> Dict[str, SelectorBuilder]:
        """Build selectors from a JSON string."""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON string: {str(e)}")
        return self._build_selectors(data)

    def load_json_file(self, file_path: Union[str, Path]) -> Dict[str, SelectorBuilder]:
        """Build selectors from a JSON file."""
        if not is_valid_file_path(file_path):
            raise ParseError(f"Invalid or non-existent file: {file_path}")
        try:
            data = load_json_data(file_path)
        except ValidationError as e:
            raise ParseError(f"Error loading JSON file: {str(e)}") from e
        return self._build_selectors(data)

    def _build_selectors(self, data: Any) -> Dict[str, SelectorBuilder]:
        if not isinstance(data, dict):
            raise ParseError("Selector definitions must be a JSON object")

        selectors = {}
        for name, definition in data.items():
            try:
                spec = SelectorSpec.model_validate(definition)
                selectors[name] = SelectorBuilder.from_spec(spec)
            except (PydanticValidationError, SelectorBuildError) as e:
                raise ParseError(f"Invalid selector definition '{name}': {str(e)}") from e
            logger.debug(f"Built selector {name}: {selectors[name].stringify()}")
        return selectors

    def build_and_validate(
        self,
        data: SelectorData,
        html_content: Optional[Union[str, Path]] = None
    ) -> Dict[str, Any]:
        """
        Build selectors, check their syntax and optionally match them
        against HTML content.

        Returns:
            Dictionary with "selectors", "processed_selectors", "all_valid"
            and, when HTML is given, boolean "html_validation" per selector.
        """
        selectors = self.load(data)
        result = self.validator.process_selectors(selectors)

        if not html_content:
            return result

        content = self._read_html(html_content)
        html_validation = self.validator.validate_html_content(content, selectors)
        return merge_selector_results(result, {"html_validation": html_validation})

    def check_in_browser(
        self,
        data: SelectorData,
        html_content: Union[str, Path]
    ) -> Dict[str, Dict[str, Any]]:
        """
        Render HTML in a headless browser and look up every selector.

        Returns:
            Mapping of selector name to {"found", "status", "content"}
        """
        selectors = self.load(data)
        content = self._read_html(html_content)

        with tempfile.NamedTemporaryFile(mode='w', suffix='.html', delete=False, encoding='utf-8') as f:
            f.write(f"""
                <!DOCTYPE html>
                <html>
                    <head>
                        <meta charset="utf-8">
                        <title>Selector Check</title>
                    </head>
                    <body>
                        {content.strip()}
                    </body>
                </html>
                """)
            temp_path = f.name

        results = {}
        try:
            with SB(headless2=True) as sb:
                sb.open(f"file://{temp_path}")
                sb.wait_for_ready_state_complete()

                for name, selector in selectors.items():
                    found, status, text = self.find_in_browser(sb, selector.stringify())
                    results[name] = {
                        "found": found,
                        "status": status,
                        "content": text
                    }
        finally:
            try:
                os.unlink(temp_path)
            except OSError as e:
                logger.warning(f"Error cleaning up temp file: {str(e)}")

        return results

    def find_in_browser(self, sb: SB, selector: str) -> Tuple[bool, str, str]:
        """
        Look up one CSS selector on the open page.

        Returns:
            Tuple of (success, status_message, extracted_content)
        """
        if not selector:
            return False, "Empty selector", ""

        try:
            sb.wait_for_element_present(selector, by="css selector", timeout=10)
            content = sb.get_text(selector, by="css selector")
            if sb.is_element_visible(selector, by="css selector"):
                return True, "Element found and visible", content
            return False, "Element found but not visible", content
        except Exception as e:
            logger.debug(f"Selector lookup failed: {str(e)}")
            return False, f"Error finding element: {str(e)}", ""

    def _read_html(self, html_content: Union[str, Path]) -> str:
        if is_valid_file_path(html_content):
            with open(html_content, 'r', encoding='utf-8') as src:
                content = src.read()
        else:
            content = str(html_content)
        if not is_valid_html_content(content):
            raise InvalidHTMLError("Invalid HTML content")
        return content
