"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path
from typing import Any, Dict

from ld_transformer.io.line_source import LineSource
from ld_transformer.parser import LDParser


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def make_parser():
    """Factory building a parser over LD text."""
    def _make(text: str, config=None) -> LDParser:
        return LDParser(LineSource.from_text(text), config)
    return _make


@pytest.fixture
def sample_ld_text() -> str:
    """Hand-written LD document exercising every key type."""
    return (
        "~~:* Inventory export\n"
        "this comment block is ignored\n"
        "~~:{\n"
        "    ~~:$name\n"
        "    Widget\n"
        "    ~~:#count\n"
        "    3\n"
        "    ~~:#price\n"
        "    9.99\n"
        "    ~~:?active\n"
        "    TRUE\n"
        "    ~~:!discontinued\n"
        "    null\n"
        "    ~~:$description\n"
        "    A small widget \n"
        "    used for testing.\n"
        "    ~~:[tags\n"
        "        ~~:$\n"
        "        blue\n"
        "        ~~:$\n"
        "        round\n"
        "    ~~:]\n"
        "    ~~:{dimensions\n"
        "        ~~:#width\n"
        "        2.50\n"
        "        ~~:#height\n"
        "        4.0\n"
        "    ~~:}\n"
        "~~:}\n"
    )


@pytest.fixture
def sample_value() -> Dict[str, Any]:
    """Decoded form of sample_ld_text."""
    return {
        "name": "Widget",
        "count": 3,
        "price": 9.99,
        "active": True,
        "discontinued": None,
        "description": "A small widget used for testing.",
        "tags": ["blue", "round"],
        "dimensions": {"width": 2.5, "height": 4},
    }


@pytest.fixture
def round_trip_value() -> Dict[str, Any]:
    """Value tree that survives encode then decode unchanged."""
    return {
        "title": "Quarterly report",
        "revision": 12,
        "ratio": 0.125,
        "owner": None,
        "empty_text": "",
        "summary": (
            "Revenue grew in every region this quarter, led by strong demand for "
            "the new product line and a recovery in wholesale orders that had "
            "slipped during the previous two quarters."
        ),
        "sections": [
            {"heading": "Overview", "pages": [1, 2, 3]},
            {"heading": "Details", "pages": []},
        ],
        "appendix": {},
        "marker": "~~:$ this text only looks like a key line",
    }
