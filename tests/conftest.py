"""
Test fixtures for the nestlist test suite.

Provides:
- Temporary directory fixtures
- Mock tree builders
- Sessions and navigators over sample trees
"""

import shutil
import tempfile
from pathlib import Path
from typing import Generator, List as ListType, Optional

import pytest

from nestlist.constants import reset_config_manager
from nestlist.core import Session
from nestlist.managers import NavigationManager, flatten
from nestlist.models.options import Options, PageOptions
from nestlist.models.tree import Item, List


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="nestlist_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def fresh_config_manager() -> Generator[None, None, None]:
    """Make sure no test sees a config loaded by another."""
    reset_config_manager()
    yield
    reset_config_manager()


# =============================================================================
# Mock Data Builders
# =============================================================================


class MockTreeBuilder:
    """Helper class for building caller trees for testing."""

    @staticmethod
    def item(name: str, sublist: Optional[List] = None, id: Optional[str] = None) -> Item:
        """Create an item whose id defaults to '<name>-id'."""
        return Item(id=id or f"{name}-id", name=name, sublist=sublist)

    @staticmethod
    def list(name: str, *items: Item) -> List:
        """Create a list from items."""
        return List(name=name, items=list(items))

    @classmethod
    def flat(cls, name: str, names: ListType[str]) -> List:
        """Create a list of leaf items."""
        return cls.list(name, *(cls.item(n) for n in names))


@pytest.fixture
def builder() -> type:
    """Provide MockTreeBuilder for tests."""
    return MockTreeBuilder


@pytest.fixture
def sample_tree() -> List:
    """
    Create a three-level tree:

    root
    - A
      - A1
        - A1a
      - A2
    - B
    """
    b = MockTreeBuilder
    return b.list(
        "root",
        b.item(
            "A",
            b.list(
                "A list",
                b.item("A1", b.list("A1 list", b.item("A1a"))),
                b.item("A2"),
            ),
        ),
        b.item("B"),
    )


@pytest.fixture
def navigator(sample_tree: List) -> NavigationManager:
    """Create a NavigationManager over the sample tree with default options."""
    store, root = flatten(sample_tree)
    return NavigationManager(store, Options(), root)


@pytest.fixture
def make_navigator():
    """Factory for NavigationManagers over a tree with given page options."""

    def _make(tree: List, page_options: Optional[ListType[PageOptions]] = None) -> NavigationManager:
        store, root = flatten(tree)
        return NavigationManager(store, Options(page_options=page_options or []), root)

    return _make


@pytest.fixture
def session(sample_tree: List) -> Session:
    """Create a Session over the sample tree that records saved trees."""
    saved: ListType[List] = []

    def _record(tree: List) -> str:
        saved.append(tree)
        return "SAVED!"

    session = Session(sample_tree, on_save=_record)
    session.saved = saved
    return session
