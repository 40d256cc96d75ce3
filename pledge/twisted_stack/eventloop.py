import threading

from twisted.internet import reactor
from twisted.internet.error import ReactorNotRunning

from pledge import launch

_instance = None


class Task:
    def __init__(self, delayed_call):
        self._delayed_call = delayed_call

    def active(self):
        return self._delayed_call.active()

    def cancel(self):
        if self._delayed_call.active():
            self._delayed_call.cancel()


class EventLoop:
    """Schedules tasks on the global Twisted reactor; there is only one."""

    def __init__(self):
        global _instance
        if _instance is not None:
            raise RuntimeError("Twisted has a single reactor, "
                               "use pledge.twisted_stack.eventloop.evlp")
        _instance = self
        self._halted = False
        self._thread_ident = threading.get_ident()

    def queue_task(self, delay, callable, *args, **kw):
        if threading.get_ident() != self._thread_ident:
            # callLater isn't thread safe; no Task to hand back from here
            reactor.callFromThread(reactor.callLater, delay, launch, callable, *args, **kw)
            return None
        return Task(reactor.callLater(delay, launch, callable, *args, **kw))

    def run(self):
        if self._halted:
            return
        self._thread_ident = threading.get_ident()
        reactor.run()

    def halt(self):
        try:
            reactor.stop()
        except ReactorNotRunning:
            # stopped before it ever ran; make the next run() a no-op
            self._halted = True

evlp = EventLoop()
queue_task = evlp.queue_task
run = evlp.run
halt = evlp.halt
