from statereducer import State


class Recorder(object):
    """ Collects the names of called hooks and handlers in call order. """

    def __init__(self):
        self.calls = []

    def __call__(self, label):
        def record(*args, **kwargs):
            self.calls.append(label)
        return record


def make_toggle(recorder):
    """ Two dictionary states which flip between each other on 'toggle'. """
    on = {'name': 'On', 'entry': recorder('on.entry'), 'exit': recorder('on.exit')}
    off = {'name': 'Off', 'entry': recorder('off.entry')}
    on['toggle'] = lambda state: off
    off['toggle'] = lambda state: on
    return on, off


class Lamp(object):
    """ An attribute based state. Handlers are regular methods. """

    def __init__(self, name, recorder=None):
        self.name = name
        self.recorder = recorder
        self.target = None
        self.received = None

    def entry(self):
        if self.recorder is not None:
            self.recorder.calls.append(self.name + '.entry')

    def exit(self):
        if self.recorder is not None:
            self.recorder.calls.append(self.name + '.exit')

    def switch(self, *args, **kwargs):
        self.received = (args, kwargs)
        return self.target

    def stay(self):
        return self

    def __repr__(self):
        return "<Lamp('%s')>" % self.name


class Bare(object):
    """ A state without any hooks. """
    pass


def raises(exception):
    def func(*args, **kwargs):
        raise exception
    return func


def named_state(name, recorder):
    return State(name, entry=recorder(name + '.entry'), exit=recorder(name + '.exit'))
