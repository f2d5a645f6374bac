"""
A message buffer which forwards one message at a time to a transport.

While the buffer waits for the transport to acknowledge a message, further
messages are queued. Each mode of the buffer is a state object and the
``send``/``ack`` events return the state the buffer continues in.
"""
import logging

from statereducer import State, create_state_machine


class MessageBuffer(object):

    def __init__(self, transport):
        self.transport = transport
        self.pending = []
        self.idle = State('idle', events={'send': self._send_idle})
        self.busy = State('busy', events={'send': self._send_busy, 'ack': self._ack})
        self.machine = create_state_machine(self.idle, name='buffer')

    def send(self, message):
        self.machine.invoke('send', message)

    def ack(self):
        self.machine.invoke('ack')

    @property
    def waiting(self):
        return self.machine.state is self.busy

    def _send_idle(self, state, message):
        self.transport(message)
        return self.busy

    def _send_busy(self, state, message):
        self.pending.append(message)
        return state

    def _ack(self, state):
        if not self.pending:
            return self.idle
        self.transport(self.pending.pop(0))
        return state


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    buffer = MessageBuffer(print)
    buffer.send('hello')
    buffer.send('world')
    buffer.ack()
    buffer.ack()
    print('waiting:', buffer.waiting)
