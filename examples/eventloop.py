import sys

import pledge
pledge.init(sys.argv[1])

from pledge.stack import eventloop
from pledge.util import sleep


def foo(x, z=1):
    sleep(1).done(lambda: print(x))

def bar(x, z=1):
    print(x)

def fail():
    raise Exception("whoo")

eventloop.queue_task(0, foo, x="promise worked")
eventloop.queue_task(0, bar, x="function worked")
eventloop.queue_task(0, fail)
eventloop.queue_task(2, eventloop.halt)
eventloop.run()
