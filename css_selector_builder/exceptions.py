class SelectorBuildError(Exception):
    """Base error for invalid selector construction."""
    pass

class DuplicateError(SelectorBuildError):
    """Element, id or pseudo-element set more than once."""
    pass

class OrderError(SelectorBuildError):
    """Selector part added after a later-ordered part."""
    pass

class CombinedSelectorError(SelectorBuildError):
    """Part added to a selector that already holds a combination."""
    pass

class ValidationError(Exception):
    """Base validation error."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass

class InvalidSelectorError(ValidationError):
    """Invalid selector error."""
    pass

class InvalidHTMLError(ValidationError):
    """Invalid HTML error."""
    pass
