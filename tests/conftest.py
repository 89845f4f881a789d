"""Shared fixtures for LAP onboarding tests."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from lap_onboarding.config import get_settings
from lap_onboarding.models.domain import LapCompany, LapCompanyUser, LapRole
from lap_onboarding.utils import domain_check


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run every test against default settings, without a .env or LAP_ overrides."""
    monkeypatch.chdir(tmp_path)
    for name in ("LAP_DEBUG", "LAP_ENVIRONMENT", "LAP_PSL_FETCH_REMOTE", "LAP_PSL_CACHE_DIR"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    domain_check._get_extractor.cache_clear()
    yield
    get_settings.cache_clear()
    domain_check._get_extractor.cache_clear()


@pytest.fixture
def make_company() -> Callable[..., LapCompany]:
    """Build a LAP company named after its index from (email, role) pairs."""

    def _make_company(index: int, *members: tuple[str, LapRole]) -> LapCompany:
        return LapCompany(
            id=index,
            name=f"Company{index}",
            users=[LapCompanyUser(email=email, role=role) for email, role in members],
        )

    return _make_company
