import sys

from twitch.errors import AuthCancelled


class Terminal:
    """Reads operator input from the controlling terminal.

    Standard input may carry a piped channel list, so the terminal device is
    opened explicitly for every read.
    """
    device = '/dev/tty'

    def __init__(self, device=None, output=None):
        self.__device = device or self.device
        self.__output = output or sys.stderr

    def write(self, text):
        self.__output.write(text)
        self.__output.flush()

    def prompt(self, text):
        self.write(text)
        try:
            with open(self.__device, 'r') as tty:
                line = tty.readline()
        except OSError as e:
            raise AuthCancelled('Cannot read from terminal: {}'.format(e)) from e
        if not line:
            raise AuthCancelled('No input given')
        return line.rstrip('\r\n')
