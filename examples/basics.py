import pledge
pledge.init('manual')

from pledge import Promise
from pledge.stack import eventloop


def square(x):
    p = Promise()
    eventloop.queue_task(0, p.resolve, x)
    return p.pipe(lambda x: x*x)

def fail():
    return Promise(lambda resolve, reject: reject(Exception("boo")))

square(5).done(lambda value: print(value))
fail().fail(lambda e: print("Caught failure:", type(e), str(e)))

view = square(3).promise()
view.then(lambda value: print("read-only view got", value))

eventloop.run()
