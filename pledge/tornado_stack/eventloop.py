import functools
import threading

import tornado.ioloop

from pledge import launch


class Task:
    def __init__(self, tornado_ioloop, timeout):
        self._timeout = timeout
        self._tornado_ioloop = tornado_ioloop

    def cancel(self):
        self._tornado_ioloop.remove_timeout(self._timeout)


class EventLoop:
    def __init__(self):
        self._thread_ident = threading.get_ident()

    @property
    def _tornado_ioloop(self):
        return tornado.ioloop.IOLoop.current()

    def queue_task(self, delay, callable, *args, **kw):
        task = functools.partial(launch, callable, *args, **kw)
        ioloop = self._tornado_ioloop

        def queue():
            timeout = ioloop.call_later(delay, task)
            return Task(ioloop, timeout)

        if threading.get_ident() != self._thread_ident:
            ioloop.add_callback(queue)
        else:
            return queue()

    def run(self):
        self._thread_ident = threading.get_ident()
        self._tornado_ioloop.start()

    def halt(self):
        self._tornado_ioloop.stop()

evlp = EventLoop()
queue_task = evlp.queue_task
run = evlp.run
halt = evlp.halt
