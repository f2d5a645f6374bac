"""
    statereducer.core
    -----------------

    This module contains the state machine which tracks a current state, applies reducers to it and
    runs the entry and exit hooks of the states involved in a transition.
"""

import inspect
import logging

from collections import deque
from collections.abc import Mapping
from functools import partial

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())


def listify(obj):
    """Wraps a passed object into a list in case it has not been a list, tuple before.
    Returns an empty list in case ``obj`` is None.
    Args:
        obj: instance to be converted into a list.
    Returns:
        list: May also return a tuple in case ``obj`` has been a tuple before.
    """
    if obj is None:
        return []

    return obj if isinstance(obj, (list, tuple)) else [obj]


def get_member(state, name):
    """ Look up a member of a state. Mappings are searched by key, everything else by attribute.
    Args:
        state: The state to inspect. May be None.
        name (str): Name of the member.
    Returns:
        The member or None if the state does not expose it.
    """
    if state is None:
        return None
    if isinstance(state, Mapping):
        return state.get(name)
    return getattr(state, name, None)


def resolve_handler(state, event_name):
    """ Resolve the handler of ``event_name`` with the state already bound as receiver.
    Args:
        state: The current state. May be None.
        event_name (str): Name of the event to dispatch.
    Returns:
        callable or None: None when the state does not handle the event.
    """
    if isinstance(state, State):
        func = state.get_handler(event_name)
    else:
        func = get_member(state, event_name)
    if func is None:
        return None
    if not callable(func):
        raise MachineError("Member '%s' of state %r is not callable." % (event_name, state))
    # methods of the state itself are already bound
    if inspect.ismethod(func) and func.__self__ is state:
        return func
    return partial(func, state)


class State(object):
    """A state with explicit lifecycle callbacks and event handlers.

    Plain objects and dictionaries can be used as states as well. ``State`` is a convenience for
    callers who prefer to declare hooks and handlers upfront.

    Attributes:
        name (str): Optional name used in log messages and representations.
        on_entry (list): Callbacks executed when the state becomes current.
        on_exit (list): Callbacks executed when the state is replaced.
        events (dict): Handlers by event name. Each handler receives the state as first argument.
    """

    def __init__(self, name=None, entry=None, exit=None, events=None):
        """
        Args:
            name (str): The name of the state
            entry (callable or list): Optional nullary callable(s) to call when the state is entered.
            exit (callable or list): Optional nullary callable(s) to call when the state is exited.
            events (dict): Optional mapping from event names to handlers. A handler is called as
                ``handler(state, *args, **kwargs)`` and returns the next state.
        """
        self.name = name
        self.on_entry = list(listify(entry))
        self.on_exit = list(listify(exit))
        self.events = dict(events) if events else {}

    def entry(self):
        """ Triggered when the state becomes current. """
        for func in self.on_entry:
            func()

    def exit(self):
        """ Triggered when the state is about to be replaced. """
        for func in self.on_exit:
            func()

    def add_callback(self, trigger, func):
        """ Add a new entry or exit callback.
        Args:
            trigger (str): The type of triggering event. Must be one of
                'entry' or 'exit'.
            func (callable): The nullary callback.
        """
        if trigger not in ('entry', 'exit'):
            raise ValueError("Trigger must be either 'entry' or 'exit' but was '%s'." % trigger)
        getattr(self, 'on_' + trigger).append(func)

    def add_event(self, name, func):
        """ Register ``func`` as handler for event ``name``, replacing a previous one. """
        self.events[name] = func

    def get_handler(self, name):
        return self.events.get(name)

    def __repr__(self):
        return "<%s('%s')@%s>" % (type(self).__name__, self.name, id(self))


class StateMachine(object):
    """ StateMachine owns exactly one current state and changes it through reducers. Whenever a reducer
    returns an object which is not identical to the current state, the current state's ``exit`` hook is
    called, the new state is assigned and its ``entry`` hook is called, in that order.

    Attributes:
        name (str): Name of the ``StateMachine`` instance mainly used for easier log message distinction.
    """

    def __init__(self, initial_state=None, name=None, queued=False, **kwargs):
        """
        Args:
            initial_state: The state to transition to right away. Its ``entry`` hook is called once
                before the constructor returns.
            name (str): If a name is set, it will be used as a prefix for logger output.
            queued (boolean): When True, transitions requested from within a hook or reducer are
                queued and processed after the running transition has finished. When False, they are
                processed immediately and nested inside the running transition.
            **kwargs additional arguments passed to next class in MRO. This can be ignored in most cases.
        """

        # calling super in case `StateMachine` is used as a mix in
        # all keyword arguments should be consumed by now if this is not the case
        try:
            super(StateMachine, self).__init__(**kwargs)
        except TypeError as err:
            raise ValueError('Passing arguments {0} caused an inheritance error: {1}'.format(kwargs.keys(), err))

        self._queued = queued
        self._transition_queue = deque()
        self._state = None
        self.name = name + ": " if name is not None else ""

        self.handle(lambda _: initial_state)

    @property
    def state(self):
        """ The current state. """
        return self._state

    @property
    def has_queue(self):
        """ Return boolean indicating if machine has queue or not """
        return self._queued

    def handle(self, reducer):
        """ Apply ``reducer`` to the current state and transition to its result.
        Args:
            reducer (callable): Receives the current state and returns the next state.
        Returns:
            bool: True if the current state has been replaced (or the transition has been queued),
                False if the reducer returned the current state.
        """
        return self._process(partial(self._handle, reducer))

    def invoke(self, event_name, /, *args, **kwargs):
        """ Dispatch ``event_name`` to the current state's handler of the same name and transition to
        whatever it returns. States without such a handler stay current.
        Args:
            event_name (str): Name of the handler to look up.
            *args: Positional arguments passed to the handler.
            **kwargs: Keyword arguments passed to the handler.
        Returns:
            bool: The result of ``handle``.
        """
        return self.handle(partial(self._dispatch, event_name, args, kwargs))

    def _dispatch(self, event_name, args, kwargs, state):
        func = resolve_handler(state, event_name)
        if func is None:
            _LOGGER.debug("%sState %s does not handle event '%s'.", self.name, state, event_name)
            return state
        _LOGGER.debug("%sDispatching event '%s' to state %s...", self.name, event_name, state)
        return func(*args, **kwargs)

    def _handle(self, reducer):
        _LOGGER.debug("%sApplying reducer to state %s...", self.name, self._state)
        next_state = reducer(self._state)
        if next_state is self._state:
            _LOGGER.debug("%sReducer returned the current state. Nothing to do.", self.name)
            return False

        previous = self._state
        self._run_hook(previous, 'exit')
        self._state = next_state
        self._run_hook(next_state, 'entry')
        _LOGGER.info("%sChanged state from %s to %s.", self.name, previous, next_state)
        return True

    def _run_hook(self, state, hook):
        func = get_member(state, hook)
        if func is None:
            return
        if not callable(func):
            raise MachineError("Hook '%s' of state %r is not callable." % (hook, state))
        _LOGGER.debug("%sCalling %s hook of state %s...", self.name, hook, state)
        func()

    def _process(self, trigger):

        # default processing
        if not self.has_queue:
            # if trigger raises an Error, it has to be handled by the caller
            return trigger()

        # process queued transitions
        self._transition_queue.append(trigger)
        # another entry in the queue implies a running transition; skip immediate execution
        if len(self._transition_queue) > 1:
            _LOGGER.debug("%sTransition in progress. Queued transition for later processing.", self.name)
            return True

        # execute as long as transition queue is not empty
        result = None
        while self._transition_queue:
            try:
                outcome = self._transition_queue[0]()
                self._transition_queue.popleft()
            except Exception:
                # if a transition raises an exception, clear queue and delegate exception handling
                self._transition_queue.clear()
                raise
            if result is None:
                result = outcome
        return result

    def __repr__(self):
        return "<%s(%r)@%s>" % (type(self).__name__, self._state, id(self))


def create_state_machine(initial_state, **kwargs):
    """ Construct a ``StateMachine`` which starts in ``initial_state``.
    Args:
        initial_state: The first state. Its ``entry`` hook is called before this function returns.
        **kwargs: Passed on to ``StateMachine``.
    Returns:
        StateMachine
    """
    return StateMachine(initial_state, **kwargs)


class MachineError(Exception):
    """ MachineError is used for issues related to states which cannot be used the way they are configured.
    For instance, it is raised when a hook or an event handler is not callable.
    """

    def __init__(self, value):
        super(MachineError, self).__init__(value)
        self.value = value

    def __str__(self):
        return repr(self.value)
