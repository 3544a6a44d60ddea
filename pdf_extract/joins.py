"""
Join strategies for concurrently running extraction tasks.

A join strategy waits for a set of tasks and either returns their results in
submission order or raises the error that decides the outcome.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Protocol, Sequence

from .exceptions import InvalidOptionsError

_LOGGER = logging.getLogger("pdf_extract")


def _discard_result(task: "asyncio.Task[Any]") -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        _LOGGER.warning("Task failed after the extraction was aborted: %s", exc)


def _retrieve_settled(tasks: Sequence["asyncio.Task[Any]"]) -> None:
    # mark exceptions of already settled tasks as retrieved
    for task in tasks:
        if task.done() and not task.cancelled():
            task.exception()


class JoinStrategy(Protocol):
    async def join(self, tasks: Sequence["asyncio.Task[Any]"]) -> List[Any]:
        """Wait for ``tasks`` and return their results in submission order."""


class FirstFailureJoin:
    """
    Raise the first failure observed; otherwise return every result.

    Sibling tasks are not cancelled when one fails. They keep running in the
    background and their outcome is discarded.
    """

    async def join(self, tasks: Sequence["asyncio.Task[Any]"]) -> List[Any]:
        for completed in asyncio.as_completed(tasks):
            try:
                await completed
            except BaseException:
                _retrieve_settled(tasks)
                for task in tasks:
                    if not task.done():
                        task.add_done_callback(_discard_result)
                raise
        return [task.result() for task in tasks]


class CancelOnFailureJoin:
    """Raise the first failure observed after cancelling and awaiting every sibling."""

    async def join(self, tasks: Sequence["asyncio.Task[Any]"]) -> List[Any]:
        for completed in asyncio.as_completed(tasks):
            try:
                await completed
            except BaseException:
                _retrieve_settled(tasks)
                pending = [task for task in tasks if not task.done()]
                for task in pending:
                    task.cancel()
                if pending:
                    _LOGGER.debug("Cancelling %d sibling tasks", len(pending))
                    await asyncio.gather(*pending, return_exceptions=True)
                raise
        return [task.result() for task in tasks]


def get_join_strategy(name: str) -> JoinStrategy:
    if name == "first-failure":
        return FirstFailureJoin()
    if name == "cancel-on-failure":
        return CancelOnFailureJoin()
    raise InvalidOptionsError(f"Unknown join policy '{name}'.")
