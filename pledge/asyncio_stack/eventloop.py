import asyncio
import functools
import threading

from pledge import launch


class EventLoop:
    """
    Schedules tasks on the asyncio loop of the thread that owns this
    object.  The owner's loop is remembered on construction, in run()
    and on every queue_task() from the owning thread, so other threads
    hand their tasks to it with call_soon_threadsafe.
    """

    def __init__(self):
        self._loop = None
        self._thread_ident = threading.get_ident()
        self._record_running_loop()

    def _record_running_loop(self):
        try:
            self._loop = asyncio.get_running_loop()
        except RuntimeError:
            pass

    @property
    def loop(self):
        if threading.get_ident() == self._thread_ident:
            self._record_running_loop()
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop

    def queue_task(self, delay, callable, *args, **kw):
        task = functools.partial(launch, callable, *args, **kw)
        loop = self.loop
        if threading.get_ident() != self._thread_ident:
            loop.call_soon_threadsafe(loop.call_later, delay, task)
        else:
            return loop.call_later(delay, task)

    def run(self):
        self._thread_ident = threading.get_ident()
        self.loop.run_forever()

    def halt(self):
        self.loop.stop()

evlp = EventLoop()
queue_task = evlp.queue_task
run = evlp.run
halt = evlp.halt
