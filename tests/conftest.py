from __future__ import annotations

import pytest
import structlog

from suffix_splitter.splitter import DomainSplitter

WILDCARD_UK = """\
// test rules
uk
*.uk
!forces.uk
"""


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logger configuration bound to a captured stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def com_splitter() -> DomainSplitter:
    return DomainSplitter.from_text("com\n")


@pytest.fixture
def uk_splitter() -> DomainSplitter:
    return DomainSplitter.from_text(WILDCARD_UK)
