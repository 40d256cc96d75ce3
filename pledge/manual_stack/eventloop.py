# An event loop that only advances when told to.  Tasks wait in a queue
# ordered by a virtual clock until run() drains them, which makes the
# order of deferred callbacks observable in tests.
import heapq
import itertools

from pledge import launch


class Task:
    def __init__(self, evlp, entry):
        self._evlp = evlp
        self._entry = entry

    def cancel(self):
        self._evlp._cancelled.add(self._entry[1])


class EventLoop:
    def __init__(self):
        self.now = 0.0
        self._queue = []
        self._seq = itertools.count()
        self._cancelled = set()
        self._running = False

    def queue_task(self, delay, callable, *args, **kw):
        entry = (self.now + delay, next(self._seq), callable, args, kw)
        heapq.heappush(self._queue, entry)
        return Task(self, entry)

    def pending(self):
        return len(self._queue) - len(self._cancelled)

    def run(self):
        """Run queued tasks, including ones they queue, until none are left."""
        self._running = True
        while self._running and self._queue:
            when, seq, callable, args, kw = heapq.heappop(self._queue)
            if seq in self._cancelled:
                self._cancelled.discard(seq)
                continue
            self.now = max(self.now, when)
            launch(callable, *args, **kw)
        self._running = False

    def halt(self):
        self._running = False

evlp = EventLoop()
queue_task = evlp.queue_task
run = evlp.run
halt = evlp.halt
