import sys
import time
import logging

logging.basicConfig(stream=sys.stderr,
                    format="%(message)s")
log = logging.getLogger("pledge")

blocking_warn_threshold = 500 # ms


class Rejected(Exception):
    """
    Carries the arguments of a rejected Promise into code that expects
    an exception, such as a Twisted errback chain.
    """
    def __init__(self, *args):
        Exception.__init__(self, *args)
        if len(args) == 0:
            self.value = None
        elif len(args) == 1:
            self.value = args[0]
        else:
            self.value = args


def default_scheduler():
    from pledge.stack import eventloop
    return eventloop.evlp


def launch(f, *args, **kwargs):
    """
    Run a task handed over by an event loop.  Exceptions escaping the
    task are logged rather than raised into the loop.
    """
    start = time.time()
    try:
        return f(*args, **kwargs)
    except Exception:
        log.exception("unhandled exception in task %r", f)
    finally:
        duration = (time.time() - start) * 1000
        if duration > blocking_warn_threshold:
            log.warning("task %r blocked for %dms", f, duration)
