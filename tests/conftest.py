import pytest
from jsx_html.config import (
	ENV_JSX_HTML_SPREAD_ATTRS,
	ENV_JSX_HTML_TAG,
	ENV_JSX_HTML_UNSAFE,
)


@pytest.fixture(autouse=True)
def _default_helper_names(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	for name in (ENV_JSX_HTML_TAG, ENV_JSX_HTML_UNSAFE, ENV_JSX_HTML_SPREAD_ATTRS):
		monkeypatch.delenv(name, raising=False)
	yield
