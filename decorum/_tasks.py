from __future__ import annotations

import asyncio
from typing import Coroutine, final


@final
class Tasks:
    """Supervise async tasks started for deferred calls.
    """
    __slots__ = ('_tasks', '_name')
    _name: str
    _tasks: set[asyncio.Task]

    def __init__(self, name: str) -> None:
        self._name = name
        self._tasks = set()

    def start(self, coro: Coroutine[None, None, None], name: str) -> asyncio.Task:
        """Create a new task and track it in the supervisor.

        The task is forgotten as soon as it is done.
        """
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def cancel(self) -> None:
        """Cancel all supervised tasks.
        """
        for task in self._tasks:
            task.cancel()

    async def wait(self) -> None:
        """Wait for all supervised tasks to finish.
        """
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def __len__(self) -> int:
        return len(self._tasks)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({repr(self._name)})'
