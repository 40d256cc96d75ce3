# Re-exports the event loop of the stack picked with pledge.init().
import importlib

import pledge

_mod = importlib.import_module("pledge.%s_stack.eventloop" % pledge._stack_name)

EventLoop = _mod.EventLoop
evlp = _mod.evlp
queue_task = _mod.queue_task
run = _mod.run
halt = _mod.halt
