import logging

from pledge.promise import Promise, Status

log = logging.getLogger("pledge.when")


class When:
    """
    Derives one promise from a fixed list of input promises.

    The derived promise resolves once every input is done and rejects
    once every input has failed, both with the arguments of whichever
    input settled last.  When all inputs settle with mixed outcomes only
    its always callbacks fire; its status is left alone.  Progress from
    any input is relayed to it as a notify.

    With no inputs at all the derived promise resolves immediately.
    """

    def __init__(self, promises, scheduler=None):
        self._promises = list(promises)
        self.cell = Promise(scheduler=scheduler)
        self._settled = False
        self._subscribe()
        if not self._promises:
            self.cell.resolve()

    def promise(self):
        return self.cell.promise()

    def _subscribe(self):
        for p in self._promises:
            p.done(self._check_status).fail(self._check_status)
            p.progress(self._fire_progress)

    def _check_status(self, *args):
        # inputs that settled before we subscribed each schedule a check
        if self._settled:
            return
        total = len(self._promises)
        done = failed = 0
        for p in self._promises:
            status = p.status()
            # waiting for everything to settle; progress alone doesn't count
            if status == Status.IDLE:
                return
            if status == Status.DONE:
                done += 1
            elif status == Status.FAILED:
                failed += 1
        self._fire(total, done, failed, args)

    def _fire(self, total, done, failed, args):
        cell = self.cell
        if done + failed == total:
            self._settled = True
        if done == total:
            cell.resolve(*args)
        elif failed == total:
            cell.reject(*args)
        elif done + failed == total:
            log.debug("%r settled with %d done, %d failed", cell, done, failed)
            cell._fire_always(args)

    def _fire_progress(self, *args):
        self.cell.notify(*args)


def when(*promises, scheduler=None):
    """
    Combine promises into one read-only promise::

        when(p1, p2, p3).then(on_all_done).fail(on_all_failed)
    """
    return When(promises, scheduler=scheduler).promise()


def when_all(promises, scheduler=None):
    return When(promises, scheduler=scheduler).promise()
