import pytest
from unittest import mock


@pytest.fixture
def mocked_slot_factory():
    def create_slot(return_value=None):
        slot = mock.Mock(spec=lambda *args, **kwargs: None)
        slot.return_value = return_value
        return slot

    return create_slot


@pytest.fixture
def slot_function_factory():
    def slot_factory():
        def slot(*args, **kwargs):
            pass

        return slot

    return slot_factory


@pytest.fixture
def slot_object_factory():
    class SlotObject:
        def __init__(self):
            self.calls = []

        def slot(self, *args, **kwargs):
            self.calls.append(args)

    return SlotObject


@pytest.fixture
def slot_factory(
    mocked_slot_factory,
    slot_object_factory,
    slot_function_factory,
):
    def factory(choice):
        choice = choice.lower()
        if choice.startswith('mock'):
            return mocked_slot_factory()
        if choice.startswith('func'):
            return slot_function_factory()
        if choice.startswith('obj'):
            return slot_object_factory()
        raise ValueError(f"argument {choice} not supported")
        
    return factory


@pytest.fixture
def call_log():
    """List recording callback calls, with a factory of logging callbacks"""
    log = []

    def make_callback(name, return_value=None):
        def callback(*args):
            log.append((name, args))
            return return_value
        callback.__name__ = name
        return callback

    return log, make_callback
