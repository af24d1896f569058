import threading

from cloudisk.protocol import CmdType
from cloudisk.taskqueue import Task, TaskQueue


def make_task(n):
    return Task(peerfd=n, epfd=0, type=CmdType.LS, data=b"")


def test_new_queue_is_empty():
    queue = TaskQueue()
    assert queue.is_empty()
    assert len(queue) == 0


def test_fifo_order_and_size():
    queue = TaskQueue()
    tasks = [make_task(n) for n in range(3)]
    for task in tasks:
        queue.put(task)
    assert len(queue) == 3
    assert not queue.is_empty()
    assert [queue.get() for _ in range(3)] == tasks
    assert queue.is_empty()


def test_get_after_broadcast_returns_none_even_with_tasks():
    queue = TaskQueue()
    queue.put(make_task(1))
    queue.broadcast_all()
    assert queue.get() is None
    assert len(queue) == 1


def test_blocked_get_receives_put_from_other_thread():
    queue = TaskQueue()
    results = []
    consumer = threading.Thread(target=lambda: results.append(queue.get()))
    consumer.start()
    task = make_task(7)
    queue.put(task)
    consumer.join(timeout=5)
    assert not consumer.is_alive()
    assert results == [task]


def test_broadcast_wakes_all_waiters():
    queue = TaskQueue()
    results = []
    lock = threading.Lock()

    def consume():
        value = queue.get()
        with lock:
            results.append(value)

    consumers = [threading.Thread(target=consume) for _ in range(4)]
    for consumer in consumers:
        consumer.start()
    queue.broadcast_all()
    for consumer in consumers:
        consumer.join(timeout=5)
    assert all(not consumer.is_alive() for consumer in consumers)
    assert results == [None] * 4
    assert queue.get() is None
    assert queue.is_empty()