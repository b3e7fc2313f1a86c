import pytest
from css_selector_builder import SelectorLoader, css_selector_builder

def pytest_addoption(parser):
    parser.addoption(
        "--run-browser",
        action="store_true",
        default=False,
        help="run browser-based tests"
    )

def pytest_configure(config):
    config.addinivalue_line(
        "markers", "browser: mark test as requiring browser"
    )

def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-browser"):
        skip_browser = pytest.mark.skip(reason="need --run-browser option to run")
        for item in items:
            if "browser" in item.keywords:
                item.add_marker(skip_browser)

@pytest.fixture
def builder():
    """Return the selector builder facade."""
    return css_selector_builder

@pytest.fixture
def loader():
    """Return an instance of the SelectorLoader class."""
    return SelectorLoader()

@pytest.fixture
def page_html():
    return (
        '<html><body>'
        '<div id="main" class="container draggable"><a href="pic.png">Picture</a></div>'
        '<table id="data"><tr><td>1</td><td>2</td></tr></table>'
        '<p class="note">Some text</p>'
        '</body></html>'
    )
