import sys

import pledge
pledge.init(sys.argv[1] if len(sys.argv) > 1 else 'manual')

from pledge import Promise, when, when_all
from pledge.stack import eventloop
from pledge.util import sleep


def fetch(name, seconds, ok=True):
    p = Promise()
    sleep(seconds).done(lambda: p.resolve(name) if ok else p.reject(name))
    return p

when(fetch("a", 1), fetch("b", 2)) \
    .progress(lambda *a: print("progress", a)) \
    .then(lambda last: print("all done, last was", last))

when_all([fetch("c", 1), fetch("d", 2, ok=False)]) \
    .fail(lambda last: print("never: not everything failed")) \
    .always(lambda last: print("mixed outcome, last was", last))

eventloop.queue_task(3, eventloop.halt)
eventloop.run()
