import pytest

from structgen.config import TypeConfig
from structgen.state import heading, paragraph, table

HEADERS = ["Field", "Type", "Description"]


@pytest.fixture
def config() -> TypeConfig:
    return TypeConfig()


@pytest.fixture
def point_elements():
    return [
        heading("Point"),
        paragraph("A 2D point."),
        table(HEADERS, [["x", "Integer", "The x."], ["y", "Integer", "The y."]]),
    ]
