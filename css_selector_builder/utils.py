from typing import Dict, Any, Type, TypeVar, Union
from pathlib import Path
import json
import re

from lxml import etree
from pydantic import BaseModel
import tinycss2

from .exceptions import ValidationError, ParseError

T = TypeVar("T")

def is_valid_file_path(path: Union[str, Path]) -> bool:
    """Check if a given path is a valid file path."""
    try:
        return Path(path).exists() and Path(path).is_file()
    except Exception:
        return False

def load_json_data(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load JSON data from a file safely.

    Args:
        file_path: Path to the JSON file

    Returns:
        Dict containing the JSON data

    Raises:
        ValidationError: If file cannot be read or JSON is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON format: {str(e)}")
    except Exception as e:
        raise ValidationError(f"Error reading file: {str(e)}")

def get_json(obj: Any) -> str:
    """
    Return the JSON representation of an object.

    Pydantic models are dumped field by field; anything else is handed
    to json.dumps as is.

        get_json([1, 2, 3])            -> '[1,2,3]'
        get_json(Rectangle(10, 20))    -> '{"width":10,"height":20}'
    """
    if isinstance(obj, BaseModel):
        obj = obj.model_dump()
    return json.dumps(obj, separators=(",", ":"))

def from_json(cls: Type[T], json_string: str) -> T:
    """
    Rebuild an instance of ``cls`` from its JSON representation.

    The values of the decoded JSON object are passed to ``cls``
    positionally, in document order.
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON string: {str(e)}")

    values = data.values() if isinstance(data, dict) else data
    return cls(*values)

def extract_selector_parts(selector: str) -> Dict[str, Any]:
    """
    Extract different parts of a simple selector.

    Args:
        selector: The selector string to analyze

    Returns:
        Dict containing parts of the selector
    """
    parts = {
        'tag': '',
        'id': '',
        'classes': [],
        'attributes': [],
        'pseudo': []
    }

    # Attribute values may contain '.', '#' or ':', so cut them out first
    parts['attributes'] = re.findall(r'\[([^\]]*)\]', selector)
    stripped = re.sub(r'\[[^\]]*\]', '', selector)

    id_match = re.search(r'#([\w-]+)', stripped)
    if id_match:
        parts['id'] = id_match.group(1)

    parts['classes'] = re.findall(r'\.([\w-]+)', stripped)

    # Pseudo-elements (::name) are counted together with pseudo-classes
    parts['pseudo'] = re.findall(r'::?([\w-]+)(?:\([^)]*\))?', stripped)

    tag_match = re.match(r'^([\w-]+|\*)', stripped)
    if tag_match:
        parts['tag'] = tag_match.group(1)

    return parts

def get_selector_specificity(selector: str) -> tuple:
    """
    Calculate the specificity of a selector.

    Combined selectors are split on their combinators and the
    specificities of the compound parts are summed.

    Args:
        selector: CSS selector string

    Returns:
        Tuple of (id_count, class_count, element_count)
    """
    # Blank out bracket and paren contents so their text can't look like combinators
    sanitized = re.sub(r'\[[^\]]*\]', '[]', selector.strip())
    sanitized = re.sub(r'\([^)]*\)', '()', sanitized)

    id_count = class_count = element_count = 0
    for compound in re.split(r'\s*[>+~]\s*|\s+', sanitized):
        if not compound:
            continue
        parts = extract_selector_parts(compound)
        pseudo_elements = len(re.findall(r'::[\w-]+', compound))
        id_count += 1 if parts['id'] else 0
        class_count += (
            len(parts['classes'])
            + len(parts['attributes'])
            + len(parts['pseudo'])
            - pseudo_elements
        )
        element_count += (1 if parts['tag'] and parts['tag'] != '*' else 0) + pseudo_elements

    return (id_count, class_count, element_count)

def merge_selector_results(
    base_results: Dict[str, Any],
    new_results: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Merge two sets of selector results, preserving validation information.

    Args:
        base_results: Original results dictionary
        new_results: New results to merge in

    Returns:
        Merged results dictionary
    """
    merged = base_results.copy()

    for key in ("selectors", "processed_selectors", "html_validation"):
        if key in new_results:
            merged[key] = {**merged.get(key, {}), **new_results[key]}

    if "all_valid" in new_results:
        merged["all_valid"] = merged.get("all_valid", True) and new_results["all_valid"]

    return merged

def is_valid_html_content(html_content: str) -> bool:
    """
    Check if content appears to be valid HTML.
    """
    if not html_content or not isinstance(html_content, str):
        return False

    html_content = html_content.strip()
    if not html_content:
        return False

    # Bare text without any tag
    if not re.search(r'<[^>]+>', html_content):
        return False

    try:
        parser = etree.HTMLParser(recover=False)
        etree.fromstring(html_content, parser)
        return True
    except (etree.ParserError, etree.XMLSyntaxError):
        has_doctype = bool(re.search(r'<!DOCTYPE\s+html', html_content, re.IGNORECASE))
        has_html_tag = bool(re.search(r'<html[\s>]', html_content, re.IGNORECASE))
        has_body_tag = bool(re.search(r'<body[\s>]', html_content, re.IGNORECASE))
        has_basic_tags = bool(re.search(r'<(?:div|p|h\d|section|article|table|ul|a)[\s>]', html_content, re.IGNORECASE))

        if not (has_doctype or has_html_tag or has_body_tag or has_basic_tags):
            return False

        open_brackets = len(re.findall(r'<(?![\s/!])', html_content))
        close_brackets = len(re.findall(r'</|/>', html_content))
        if open_brackets != close_brackets:
            return False

        # Tag opened inside another tag, e.g. "<invalid<html>"
        if re.search(r'<\w+[^>]*<\w+', html_content):
            return False

        return True
    except Exception:
        return False

COMBINATORS = (">", "+", "~", ",")

def normalize_selector(selector: str) -> str:
    """
    Normalize a CSS selector string.

    Works on tinycss2 tokens: runs of whitespace become a single descendant
    combinator where one is meant, padding around the > + ~ , combinators
    and inside attribute brackets is dropped. Quoted strings and function
    arguments are serialized untouched.
    """
    if not selector:
        return ""

    tokens = tinycss2.parse_component_value_list(selector)

    result_parts = []
    pending_space = False
    prev_token = None

    for token in tokens:
        if token.type == "whitespace":
            pending_space = True
            continue

        if _is_combinator(token):
            result_parts.append(token.value)
            prev_token = token
            pending_space = False
            continue

        if prev_token is not None and pending_space and _needs_descendant_space(prev_token, token):
            result_parts.append(" ")

        if token.type == "[] block":
            result_parts.append(_serialize_attribute_block(token))
        else:
            result_parts.append(token.serialize())
        prev_token = token
        pending_space = False

    return "".join(result_parts)

def _is_combinator(token) -> bool:
    return token.type == "literal" and token.value in COMBINATORS

def _serialize_attribute_block(block) -> str:
    """Serialize ``[ name = "value" i ]`` as ``[name="value" i]``."""
    words = ("ident", "string", "number", "dimension")
    parts = []
    pending_space = False
    prev_token = None
    for token in block.content:
        if token.type == "whitespace":
            pending_space = True
            continue
        if pending_space and prev_token is not None and prev_token.type in words and token.type in words:
            parts.append(" ")
        parts.append(token.serialize())
        prev_token = token
        pending_space = False
    return "[" + "".join(parts) + "]"

def _needs_descendant_space(prev_token, current_token) -> bool:
    """
    True if whitespace between two tokens is a descendant combinator
    (``div span``, ``[x] a``) rather than padding (``div > span``).
    """
    left = ("ident", "hash", "dimension", "number", "string", "[] block", "function", ") block")
    right = ("ident", "hash", "dimension", "number", "string", "[] block", "function")
    if prev_token.type in left and current_token.type in right:
        return True
    if prev_token.type in left and current_token.type == "literal" and current_token.value in (".", ":", "*"):
        return True
    if prev_token.type == "literal" and prev_token.value == "*" and (
        current_token.type in right
        or (current_token.type == "literal" and current_token.value in (".", ":", "*"))
    ):
        return True
    return False
