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

"""Scoped acquisition with guaranteed release.

Nothing here touches the filesystem: a handle only records its lifecycle in a
journal so the order of open, use and close can be shown.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass

from ..registry import Registry


@dataclass(slots=True)
class FileHandle:
    file_descriptor: str
    closed: bool = False


@contextmanager
def open_handle(path: str, journal: list[str]) -> Iterator[FileHandle]:
    """Open a handle for the duration of a ``with`` block.

    The handle is closed on every exit path, including when the block raises.
    """

    handle = FileHandle(file_descriptor=path)
    journal.append(f"open {path}")
    try:
        yield handle
    finally:
        handle.closed = True
        journal.append(f"close {path}")


def do_stuff(journal: list[str]) -> None:
    journal.append("Checkpoint 2")
    with ExitStack() as stack:
        _ = stack.callback(journal.append, "Do clean up here")
        journal.append("Checkpoint 3")


def scoped_release() -> str:
    journal: list[str] = []
    with open_handle("notes.txt", journal) as handle:
        journal.append(f"read {handle.file_descriptor}")
    return " -> ".join(journal)


def scoped_release_on_error() -> str:
    journal: list[str] = []
    try:
        with open_handle("scratch.txt", journal):
            raise OSError("disk full")
    except OSError as error:
        journal.append(f"caught {error}")
    return " -> ".join(journal)


def deferred_cleanup() -> str:
    journal: list[str] = []
    do_stuff(journal)
    return " -> ".join(journal)


def register(registry: Registry) -> None:
    registry.register(
        "scoped-release",
        scoped_release,
        summary="The handle closes when the block ends.",
    )
    registry.register(
        "scoped-release-on-error",
        scoped_release_on_error,
        summary="The handle closes even when the block raises.",
    )
    registry.register(
        "deferred-cleanup",
        deferred_cleanup,
        summary="Cleanup registered early runs after the rest of the block.",
    )


__all__ = ["FileHandle", "do_stuff", "open_handle", "register"]
