from pledge.core import default_scheduler
from pledge.promise import Promise


def defer(*args, scheduler=None):
    """Return a promise already resolved with ``args``."""
    return Promise(scheduler=scheduler).resolve(*args)


def sleep(seconds, scheduler=None):
    p = Promise(scheduler=scheduler)
    (scheduler or default_scheduler()).queue_task(seconds, p.resolve)
    return p
