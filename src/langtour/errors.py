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

"""Base exception hierarchy for :mod:`langtour`."""

from __future__ import annotations


class LangtourError(Exception):
    """Base class for all langtour exceptions.

    Errors raised by a demonstration while it runs are *not* part of this
    hierarchy: the runner captures those and records them as failures in the
    report. ``LangtourError`` subclasses describe mistakes in how the tour
    itself was assembled or configured.

    Example:
        Catch any langtour-specific error::

            try:
                registry = default_registry()
            except LangtourError as e:
                logger.error("Tour setup failed: %s", e)
                raise
    """


class DuplicateNameError(LangtourError, ValueError):
    """Raised when a demonstration name is registered twice.

    Names identify demonstrations in the report, so they must be unique
    within a registry. The failed registration leaves the registry unchanged.

    Example::

        registry.register("greeting", lambda: "hello")
        registry.register("greeting", lambda: "hi")  # raises

    Note:
        This is a programming mistake in the fixed tour and is fatal at
        startup. It also inherits from ``ValueError``.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Demonstration {name!r} is already registered.")
        self.name = name


class RegistryFrozenError(LangtourError, RuntimeError):
    """Raised when registering into a registry that has started running.

    The runner freezes a registry as soon as a run begins so that every run
    over the same registry produces the same report.
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Cannot register {name!r}: the registry is frozen once a run begins."
        )
        self.name = name


class ConfigError(LangtourError, ValueError):
    """Raised when the langtour configuration is invalid."""


__all__ = [
    "ConfigError",
    "DuplicateNameError",
    "LangtourError",
    "RegistryFrozenError",
]
