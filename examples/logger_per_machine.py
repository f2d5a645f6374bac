"""
When instantiating multiple StateMachine, it can be useful to tell their log
messages apart. This example passes a name to each machine which is used as
prefix for every log entry.
"""
import logging
import statereducer


def make_fsm(no):
    green = {'name': 'green'}
    yellow = {'name': 'yellow'}
    red = {'name': 'red'}
    green['next'] = lambda state: yellow
    yellow['next'] = lambda state: red
    red['next'] = lambda state: green
    return statereducer.create_state_machine(green, name='FSM%s' % no)


logging.basicConfig(level=logging.INFO)

fsm0 = make_fsm(0)
fsm1 = make_fsm(1)

fsm0.invoke('next')
fsm1.invoke('next')
fsm0.invoke('next')
fsm1.invoke('next')
