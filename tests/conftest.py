from __future__ import annotations

from typing import Callable, Mapping

import pytest

from envresolve.notifications import CapturingSink
from envresolve.resolver import ConfigResolver


@pytest.fixture
def sink() -> CapturingSink:
    return CapturingSink()


@pytest.fixture
def make_resolver(sink: CapturingSink) -> Callable[[Mapping[str, str | None]], ConfigResolver]:
    def _make(environ: Mapping[str, str | None]) -> ConfigResolver:
        return ConfigResolver(dict(environ), sink)

    return _make
