import pytest

from lazycell import Graph, graph_context, config


@pytest.fixture
def graph():
    g = Graph()
    with graph_context(g):
        yield g


@pytest.fixture
def deduplicate():
    old = config.deduplicate_invalidation
    config.set_deduplicate_invalidation(True)
    yield
    config.set_deduplicate_invalidation(old)
