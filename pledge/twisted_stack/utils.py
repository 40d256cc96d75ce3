from twisted.python.failure import Failure
from twisted.internet.defer import Deferred

from pledge.core import Rejected
from pledge.promise import Promise


def _value(args):
    # mimic the semantics of the return statement
    if len(args) == 0:
        return None
    elif len(args) == 1:
        return args[0]
    return args


def promise_to_deferred(p):
    df = Deferred()
    def call_deferred_back(*args):
        df.callback(_value(args))
    def call_deferred_err(*args):
        v = _value(args)
        if not isinstance(v, Exception):
            v = Rejected(*args)
        df.errback(Failure(v, type(v), None))
    p.done(call_deferred_back).fail(call_deferred_err)
    return df


def deferred_to_promise(df, scheduler=None):
    p = Promise(scheduler=scheduler)
    def got_result(result):
        p.resolve(result)
        return result
    def got_failure(f):
        p.reject(f.value)
    df.addCallbacks(got_result, got_failure)
    return p
