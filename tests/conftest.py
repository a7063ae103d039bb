from collections.abc import Callable
from typing import Any

import pytest

from listcore import ArraySequence, LinkedSequence, ListMixin

CONTAINERS: list[type[ListMixin[Any]]] = [ArraySequence, LinkedSequence]


@pytest.fixture(params=CONTAINERS, ids=lambda cls: cls.__name__)
def container(request: pytest.FixtureRequest) -> type[ListMixin[Any]]:
    """Every test using this fixture runs once per concrete container."""
    return request.param


@pytest.fixture
def make(container: type[ListMixin[Any]]) -> Callable[..., ListMixin[Any]]:
    def _make(*items: Any, **kwargs: Any) -> ListMixin[Any]:
        return container(items=items, **kwargs)  # pyright: ignore[reportCallIssue]

    return _make
