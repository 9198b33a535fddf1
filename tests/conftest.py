import pytest

from symbolic_expression import get_global_pool, release_tree


@pytest.fixture
def pool():
    """Global node pool; fails the test if it leaves nodes unreleased"""
    node_pool = get_global_pool()
    baseline = node_pool.live_count
    yield node_pool
    assert node_pool.live_count == baseline, "test leaked expression nodes"


@pytest.fixture
def release():
    """Collects trees during a test and releases them afterwards"""
    owned = []

    def track(tree):
        owned.append(tree)
        return tree

    yield track
    for tree in owned:
        release_tree(tree)
