# A lightweight promise, API modeled on jQuery's Deferred.  Callbacks
# registered on a channel fire synchronously when the promise is
# notified, resolved or rejected; there is no callback chaining beyond
# the pipe stage.
import itertools
import logging
from enum import IntEnum

from pledge.core import default_scheduler

log = logging.getLogger("pledge.promise")

_ids = itertools.count(1)

DONE = 'done'
FAIL = 'fail'
ALWAYS = 'always'
PROGRESS = 'progress'
PIPE = 'pipe'

CHANNELS = (DONE, FAIL, ALWAYS, PROGRESS, PIPE)


class Status(IntEnum):
    IDLE = 0
    PROGRESSED = 1
    FAILED = 2
    DONE = 3

    @classmethod
    def lookup(cls, status):
        if isinstance(status, cls):
            return status
        if isinstance(status, str):
            try:
                return cls[status.upper()]
            except KeyError:
                raise ValueError("unknown promise status %r" % status)
        return cls(status)


TERMINAL = (Status.FAILED, Status.DONE)


def _check_callable(func):
    if not callable(func):
        raise TypeError("'%s' object is not callable" % type(func).__name__)


class Promise:
    """
    A single-assignment result with done, fail, always, progress and
    pipe channels.

    ``resolve`` and ``reject`` are one-shot: the first one wins and any
    later call is ignored.  ``notify`` may be called any number of times
    before that.  Exceptions raised by callbacks are not caught; they
    propagate to whoever settled the promise.

    If ``func`` is given it is called right away as
    ``func(resolve, reject)``.  ``scheduler`` is an event loop with a
    ``queue_task(delay, callable, *args)`` method, used to run callbacks
    registered after the promise settled.  It defaults to the stack
    chosen with ``pledge.init()``.
    """

    def __init__(self, func=None, scheduler=None):
        self.id = next(_ids)
        self._status = Status.IDLE
        self._calls = {}
        self._fired_args = ()
        self._scheduler = scheduler
        if func is not None:
            func(self.resolve, self.reject)

    def done(self, func):
        return self._push_call(DONE, func)

    then = done

    def fail(self, func):
        return self._push_call(FAIL, func)

    def always(self, func):
        return self._push_call(ALWAYS, func)

    finally_ = always

    def progress(self, func):
        return self._push_call(PROGRESS, func)

    def pipe(self, func):
        """
        Register a transform run before done/progress/always callbacks.
        A non-None return value replaces the arguments seen by the next
        pipe and by the callbacks.  Rejections are never piped.
        """
        return self._push_call(PIPE, func)

    def _push_call(self, channel, func):
        _check_callable(func)
        status = self._status
        if ((status == Status.DONE and channel == DONE) or
            (status == Status.FAILED and channel == FAIL) or
            (status in TERMINAL and channel == ALWAYS)):
            # never call back into user code from inside a registration
            scheduler = self._scheduler or default_scheduler()
            scheduler.queue_task(0, func, *self._fired_args)
            return self

        self._get_calls(channel).append(func)
        return self

    def notify(self, *args):
        if self._status in TERMINAL:
            return self

        self._status = Status.PROGRESSED

        args = self._run_pipe(args)
        self._fire(PROGRESS, args)
        # a progress callback may have settled us; always already ran then
        if self._status in TERMINAL:
            return self
        self._fire(ALWAYS, args)
        return self

    def resolve(self, *args):
        if self._status in TERMINAL:
            return self

        self._status = Status.DONE
        log.debug("%r resolved", self)

        args = self._run_pipe(args)
        self._fire(DONE, args)
        self._fire(ALWAYS, args)

        self._cleanup()
        return self

    def reject(self, *args):
        if self._status in TERMINAL:
            return self

        self._status = Status.FAILED
        log.debug("%r rejected", self)

        self._fire(FAIL, args)
        self._fire(ALWAYS, args)

        self._cleanup()
        return self

    def status(self):
        return self._status

    def is_(self, status):
        return self._status == Status.lookup(status)

    def promise(self):
        return PromiseView(self)

    def __call__(self, *args):
        return self.notify(*args)

    def call(self, context, *args):
        return self.notify(*args)

    def apply(self, context, args):
        return self.notify(*args)

    def _fire(self, channel, args):
        self._fired_args = args
        # a callback may register more callbacks on this channel; only
        # the ones present when firing started are run
        for func in list(self._get_calls(channel)):
            func(*args)
        return self

    def _fire_always(self, args):
        return self._fire(ALWAYS, args)

    def _run_pipe(self, args):
        for func in self._get_calls(PIPE):
            value = func(*args)
            if value is not None:
                args = (value,)
        return args

    def _get_calls(self, channel):
        calls = self._calls.get(channel)
        if calls is None:
            calls = self._calls[channel] = []
        return calls

    def _cleanup(self):
        for channel in (DONE, FAIL, ALWAYS):
            if channel in self._calls:
                del self._calls[channel][:]

    def __repr__(self):
        counts = ", ".join("%s: %d" % (channel, len(self._calls.get(channel, ())))
                           for channel in CHANNELS)
        return "<%s.%s id: %d, status: %s, %s>" % (self.__class__.__module__,
                                                   self.__class__.__name__,
                                                   self.id,
                                                   self._status.name.lower(),
                                                   counts)


class PromiseView:
    """Read-only face of a Promise: callbacks can be added, nothing settled."""

    __slots__ = ('_promise',)

    def __init__(self, promise):
        self._promise = promise

    def done(self, func):
        self._promise.done(func)
        return self

    then = done

    def fail(self, func):
        self._promise.fail(func)
        return self

    def always(self, func):
        self._promise.always(func)
        return self

    finally_ = always

    def progress(self, func):
        self._promise.progress(func)
        return self

    def pipe(self, func):
        self._promise.pipe(func)
        return self

    def __repr__(self):
        return "<%s.%s of %r>" % (self.__class__.__module__,
                                  self.__class__.__name__,
                                  self._promise)
