import sys

import pledge
pledge.init(sys.argv[1])

from pledge.stack import eventloop
from pledge.util import sleep


def print_every(seconds, times, label):
    p = pledge.Promise()
    def tick(i):
        if i == times:
            p.resolve(label)
            return
        print(label)
        p.notify(i)
        sleep(seconds).done(lambda: tick(i + 1))
    tick(0)
    return p

ones = print_every(1, 5, "1")
twos = print_every(2, 5, "2")
pledge.when(ones, twos).progress(lambda i: None).done(lambda last: eventloop.halt())
eventloop.run()
