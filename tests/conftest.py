from __future__ import annotations

import pytest

from dox.parser import ParseOptions


@pytest.fixture
def raw_options() -> ParseOptions:
    """Parse options that keep descriptions as plain text."""
    return ParseOptions(raw=True)
