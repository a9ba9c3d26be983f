# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

import langtour.dbc as dbc_module
from langtour import Registry


class _Boom(Exception):
    pass


def _raise(message: str) -> Callable[[], object]:
    def explode() -> object:
        raise _Boom(message)

    return explode


@pytest.fixture
def scenario_registry() -> Registry:
    """basic-math, boom, greeting: the canonical three-unit tour."""

    registry = Registry()
    registry.register("basic-math", lambda: str(1 + 2))
    registry.register("boom", _raise("divide by zero"))
    registry.register("greeting", lambda: "hello")
    return registry


@pytest.fixture
def dbc_on(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Force contract checks on for the duration of a test."""

    monkeypatch.delenv("LANGTOUR_DBC", raising=False)
    dbc_module._forced_state = True
    yield
    dbc_module._forced_state = None


@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in original_handlers:
                handler.close()
        root.handlers = original_handlers
        root.setLevel(original_level)
