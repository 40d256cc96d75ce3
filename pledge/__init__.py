import sys

VERSION = '0.3.0'

_stack_name = 'asyncio'


def init(stack_name):
    """
    Pick the event loop stack ('asyncio', 'tornado', 'twisted' or
    'manual') used by promises that weren't given a scheduler.  Must be
    called before pledge.stack.eventloop is first imported.
    """
    global _stack_name
    if ('pledge.stack.eventloop' in sys.modules and
        stack_name != _stack_name):
        raise RuntimeError("pledge stack '%s' already loaded, can't switch to '%s'"
                           % (_stack_name, stack_name))
    _stack_name = stack_name


from pledge.core import launch, Rejected
from pledge.promise import Promise, PromiseView, Status
from pledge.when import When, when, when_all
