"""Shared pytest fixtures and configuration for the enum-inspect test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Catalog caches are cleared around every test.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from enum_inspect.core.enum_service import EnumService
from enum_inspect.core.models import EnumValue, ValueCatalog
from enum_inspect.infra.description_provider import MemberDescriptionProvider
from enum_inspect.infra.python_enum_provider import PythonEnumCatalogProvider


@pytest.fixture(autouse=True)
def _clear_catalog_cache() -> Iterator[None]:
    PythonEnumCatalogProvider.cache_clear()
    yield
    PythonEnumCatalogProvider.cache_clear()


@pytest.fixture
def make_catalog() -> Callable[..., ValueCatalog]:
    """Factory building a catalog from ``(name, value)`` pairs."""

    def _make(*pairs: tuple[str, int], is_flags: bool = True) -> ValueCatalog:
        return ValueCatalog(
            type_name="tests.Sample",
            entries=tuple(EnumValue(name=n, value=v) for n, v in pairs),
            is_flags=is_flags,
        )

    return _make


@pytest.fixture
def service() -> EnumService:
    catalogs = PythonEnumCatalogProvider()
    return EnumService(catalogs, MemberDescriptionProvider(catalogs))
