import asyncio

from decorum._tasks import Tasks


async def test_wait():
    t = Tasks('tasks')
    for _ in range(20):
        t.start(asyncio.sleep(.001), 'task')
    assert len(t) == 20
    await t.wait()
    assert len(t) == 0


async def test_wait__ignores_errors():
    async def explode():
        1 / 0

    t = Tasks('tasks')
    task = t.start(explode(), 'task')
    await t.wait()
    assert isinstance(task.exception(), ZeroDivisionError)


async def test_cancel():
    t = Tasks('tasks')
    tasks = [t.start(asyncio.sleep(.001), 'task') for _ in range(20)]
    await asyncio.sleep(0)
    t.cancel()
    await asyncio.sleep(0)
    for task in tasks:
        assert task.cancelled()


async def test_cleanup_old_finished():
    t = Tasks('tasks')
    for _ in range(91):
        t.start(asyncio.sleep(.001), 'task1')
    for _ in range(4):
        t.start(asyncio.sleep(.05), 'task2')
    # give tasks1 time to finish but not enough for tasks2
    await asyncio.sleep(.01)
    for _ in range(9):
        t.start(asyncio.sleep(.001), 'task3')
    assert len(t) == 13


def test_repr():
    assert repr(Tasks('queue')) == "Tasks('queue')"
