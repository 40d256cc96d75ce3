import pytest

import pledge
pledge.init('manual')

from pledge.manual_stack.eventloop import EventLoop


@pytest.fixture
def evlp():
    return EventLoop()


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


@pytest.fixture
def recorder():
    return Recorder
