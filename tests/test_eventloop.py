import asyncio
import logging
import threading

import pytest

import pledge
from pledge import Promise
from pledge.manual_stack.eventloop import EventLoop


def test_manual_runs_in_delay_order(evlp):
    order = []
    evlp.queue_task(2, order.append, "late")
    evlp.queue_task(0, order.append, "first")
    evlp.queue_task(0, order.append, "second")
    assert evlp.pending() == 3
    assert order == []
    evlp.run()
    assert order == ["first", "second", "late"]
    assert evlp.now == 2


def test_manual_runs_tasks_queued_while_running(evlp):
    order = []
    def outer():
        order.append("outer")
        evlp.queue_task(0, order.append, "inner")
    evlp.queue_task(0, outer)
    evlp.run()
    assert order == ["outer", "inner"]


def test_manual_cancel(evlp):
    order = []
    task = evlp.queue_task(0, order.append, "x")
    task.cancel()
    assert evlp.pending() == 0
    evlp.run()
    assert order == []


def test_manual_halt(evlp):
    order = []
    evlp.queue_task(0, evlp.halt)
    evlp.queue_task(1, order.append, "after")
    evlp.run()
    assert order == []
    evlp.run()
    assert order == ["after"]


def test_task_exception_is_logged(evlp, caplog):
    def boom():
        raise RuntimeError("boom")
    evlp.queue_task(0, boom)
    with caplog.at_level(logging.ERROR, logger="pledge"):
        evlp.run()
    assert "unhandled exception" in caplog.text
    assert "boom" in caplog.text


def test_blocking_task_warns(evlp, caplog, monkeypatch):
    monkeypatch.setattr(pledge.core, "blocking_warn_threshold", -1)
    evlp.queue_task(0, lambda: None)
    with caplog.at_level(logging.WARNING, logger="pledge"):
        evlp.run()
    assert "blocked for" in caplog.text


def test_late_callback_exception_does_not_escape(evlp, caplog):
    p = Promise(scheduler=evlp).resolve()
    def boom():
        raise ValueError("late")
    p.done(boom)
    with caplog.at_level(logging.ERROR, logger="pledge"):
        evlp.run()
    assert "late" in caplog.text


def test_stack_dispatch_uses_init_choice():
    from pledge.stack import eventloop
    from pledge.manual_stack import eventloop as manual
    assert eventloop.evlp is manual.evlp


def test_init_cannot_switch_loaded_stack():
    from pledge.stack import eventloop
    with pytest.raises(RuntimeError):
        pledge.init('asyncio')
    pledge.init('manual')


def test_asyncio_queue_task_in_running_loop():
    from pledge.asyncio_stack.eventloop import EventLoop as AsyncioEventLoop
    results = []

    async def main():
        loop = AsyncioEventLoop()
        p = Promise(scheduler=loop).resolve("hi")
        p.done(results.append)
        assert results == []
        await asyncio.sleep(0.01)

    asyncio.run(main())
    assert results == ["hi"]


def test_asyncio_run_and_halt():
    from pledge.asyncio_stack.eventloop import EventLoop as AsyncioEventLoop
    loop = AsyncioEventLoop()
    results = []
    loop.queue_task(0, results.append, 1)
    loop.queue_task(0.01, loop.halt)
    loop.run()
    assert results == [1]


def test_tornado_queue_task():
    pytest.importorskip("tornado")
    from pledge.tornado_stack.eventloop import evlp as tornado_evlp
    results = []

    async def main():
        p = Promise(scheduler=tornado_evlp).reject("no")
        p.fail(results.append)
        assert results == []
        await asyncio.sleep(0.01)

    asyncio.run(main())
    assert results == ["no"]


def test_tornado_cancel():
    pytest.importorskip("tornado")
    from pledge.tornado_stack.eventloop import evlp as tornado_evlp
    results = []

    async def main():
        task = tornado_evlp.queue_task(0, results.append, "x")
        task.cancel()
        await asyncio.sleep(0.01)

    asyncio.run(main())
    assert results == []


def test_asyncio_late_callback_from_worker_thread():
    from pledge.asyncio_stack.eventloop import EventLoop as AsyncioEventLoop
    results = []

    async def main():
        loop = AsyncioEventLoop()
        p = Promise(scheduler=loop).resolve("hi")
        worker = threading.Thread(target=p.done, args=(results.append,))
        worker.start()
        worker.join()
        await asyncio.sleep(0.05)

    asyncio.run(main())
    assert results == ["hi"]


def test_twisted_task_cancel():
    pytest.importorskip("twisted")
    from pledge.twisted_stack.eventloop import evlp as twisted_evlp
    task = twisted_evlp.queue_task(5, lambda: None)
    assert task.active()
    task.cancel()
    assert not task.active()
    task.cancel()


def test_twisted_single_event_loop():
    pytest.importorskip("twisted")
    from pledge.twisted_stack.eventloop import EventLoop as TwistedEventLoop
    with pytest.raises(RuntimeError):
        TwistedEventLoop()


# the reactor can't be restarted, so this is the only test that runs it
def test_twisted_runs_tasks_through_launch(caplog):
    pytest.importorskip("twisted")
    from pledge.twisted_stack.eventloop import evlp as twisted_evlp
    results = []
    p = Promise(scheduler=twisted_evlp).resolve("late")
    p.done(results.append)

    def boom():
        raise RuntimeError("reactor boom")
    twisted_evlp.queue_task(0, boom)
    twisted_evlp.queue_task(0.01, twisted_evlp.halt)
    with caplog.at_level(logging.ERROR, logger="pledge"):
        twisted_evlp.run()
    assert results == ["late"]
    assert "reactor boom" in caplog.text
