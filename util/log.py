import os
import sys


class Log:
    program = 'twitch-ls'

    @staticmethod
    def fatal(msg, status=1):
        Log.error('Error: ' + msg)
        sys.exit(status)

    @staticmethod
    def warning(msg):
        Log.error(msg)

    @staticmethod
    def error(msg):
        sys.stderr.write('{}: {}{}'.format(Log.program, msg, os.linesep))
        sys.stderr.flush()


class Notices:
    """Informational messages that never affect control flow.

    Use ``Notices.emit()`` normally and ``Notices.suppress()`` for quiet mode.
    """

    def __init__(self, write):
        self.__write = write

    def notify(self, msg):
        self.__write(msg)

    @classmethod
    def emit(cls):
        return cls(Log.warning)

    @classmethod
    def suppress(cls):
        return cls(lambda _: None)
