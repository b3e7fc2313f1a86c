# css_selector_builder/__init__.py
from .builder import (
    SelectorBuilder,
    SelectorPart,
    CssSelectorBuilder,
    css_selector_builder,
    element,
    id,
    class_,
    attr,
    pseudo_class,
    pseudo_element,
    combine
)
from .models import SelectorSpec, Rectangle
from .validators import SelectorValidator, SelectorInfo
from .loader import SelectorLoader
from .exceptions import (
    SelectorBuildError,
    DuplicateError,
    OrderError,
    CombinedSelectorError,
    ValidationError,
    ParseError,
    InvalidSelectorError,
    InvalidHTMLError
)
from .utils import (
    get_json,
    from_json,
    normalize_selector,
    extract_selector_parts,
    get_selector_specificity,
    merge_selector_results,
    is_valid_html_content,
    is_valid_file_path,
    load_json_data
)

__version__ = "0.1.0"

__all__ = [
    # Builder
    "SelectorBuilder",
    "SelectorPart",
    "CssSelectorBuilder",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",

    # Models and checks
    "SelectorSpec",
    "Rectangle",
    "SelectorValidator",
    "SelectorInfo",
    "SelectorLoader",

    # Exceptions
    "SelectorBuildError",
    "DuplicateError",
    "OrderError",
    "CombinedSelectorError",
    "ValidationError",
    "ParseError",
    "InvalidSelectorError",
    "InvalidHTMLError",

    # Utility functions
    "get_json",
    "from_json",
    "normalize_selector",
    "extract_selector_parts",
    "get_selector_specificity",
    "merge_selector_results",
    "is_valid_html_content",
    "is_valid_file_path",
    "load_json_data"
]
