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

"""Tests for design-by-contract decorators."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import given, settings, strategies as st

import langtour.dbc as dbc_module
from langtour.dbc import dbc_active, dbc_enabled, ensure, invariant, require


@pytest.fixture(autouse=True)
def reset_dbc_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("LANGTOUR_DBC", raising=False)
    dbc_module._forced_state = None
    yield
    dbc_module._forced_state = None


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", True), ("yes", True), ("0", False), ("off", False), ("", False)],
)
def test_env_flag_controls_activation(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
) -> None:
    monkeypatch.setenv("LANGTOUR_DBC", value)

    assert dbc_active() is expected


def test_dbc_enabled_restores_previous_state() -> None:
    assert not dbc_active()

    with dbc_enabled():
        assert dbc_active()
        with dbc_enabled(active=False):
            assert not dbc_active()
        assert dbc_active()

    assert not dbc_active()


def test_contracts_skipped_when_inactive() -> None:
    @require(lambda x: x > 0)
    def identity(x: int) -> int:
        return x

    assert identity(-1) == -1


@given(st.integers(min_value=1, max_value=1000))
@settings(max_examples=50)
def test_require_passes_for_valid_inputs(value: int) -> None:
    @require(lambda x: x > 0)
    def square(x: int) -> int:
        return x * x

    with dbc_enabled():
        assert square(value) == value * value


@given(st.integers(max_value=0))
@settings(max_examples=50)
def test_require_rejects_invalid_inputs(value: int) -> None:
    @require(lambda x: x > 0)
    def square(x: int) -> int:
        return x * x

    with dbc_enabled(), pytest.raises(AssertionError, match="require contract"):
        square(value)


def test_ensure_receives_result_and_reports_detail() -> None:
    @ensure(lambda x, *, result: (result == x + 1, f"got {result}"))
    def off_by_two(x: int) -> int:
        return x + 2

    with dbc_enabled(), pytest.raises(AssertionError, match="Details: got 3"):
        off_by_two(1)


def test_ensure_rejects_empty_tuple_results() -> None:
    @ensure(lambda **_: ())
    def noop() -> None:
        return None

    with dbc_enabled(), pytest.raises(TypeError):
        noop()


def test_invariant_checked_after_init_and_methods() -> None:
    @invariant(lambda counter: counter.value >= 0)
    class Counter:
        def __init__(self, value: int) -> None:
            self.value = value

        def decrement(self) -> None:
            self.value -= 1

    with dbc_enabled():
        counter = Counter(1)
        counter.decrement()
        with pytest.raises(AssertionError, match="invariant contract"):
            counter.decrement()
        with pytest.raises(AssertionError):
            Counter(-5)


@pytest.mark.parametrize("decorator", [require, ensure, invariant])
def test_decorators_require_predicates(decorator: object) -> None:
    with pytest.raises(ValueError):
        decorator()  # type: ignore[operator]
