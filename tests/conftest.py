import pytest

from nepal_traversal.core import get_district_graph


@pytest.fixture(scope="session")
def district_graph():
    return get_district_graph()
