import sys

STDIN = '-'


class ChannelList:
    @staticmethod
    def read(lines):
        return [line.strip() for line in lines if line.strip()]

    @classmethod
    def load(cls, source, stdin=None):
        """Channels from a file path, or from stdin when ``source`` is ``-``.

        Returns None when the source cannot be read or decoded.
        """
        try:
            if source == STDIN:
                return cls.read(stdin or sys.stdin)
            with open(source, 'r') as channels_file:
                return cls.read(channels_file)
        except (OSError, UnicodeDecodeError):
            return None

    @staticmethod
    def merge(file_channels, operands):
        return list(file_channels or []) + list(operands or [])
