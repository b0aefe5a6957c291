import signal
import sys
from argparse import ArgumentParser

from twitch.authorization import Authorization
from twitch.channels import ChannelList
from twitch.errors import ConfigError, TwitchError
from twitch.session import SessionResolver
from twitch.settings import Settings
from twitch.token import TokenStore
from util import dependencies
from util.log import Log, Notices

VERSION = '1.0'


class CommandLineParser(ArgumentParser):
    def __init__(self):
        super().__init__(
            prog=Log.program,
            usage='%(prog)s [-f <file>] [-hlLqv] [<channel>]...',
            description='List online twitch channels',
        )
        self.add_argument('channels', nargs='*', metavar='channel')
        self.add_argument(
            '-f',
            dest='file',
            metavar='<file>',
            help="use <file> as list of channels to check status on ('-' reads stdin)"
        )
        self.add_argument(
            '-l',
            dest='long',
            help='long listing format including stream titles',
            action='store_true',
            default=False
        )
        self.add_argument(
            '-L',
            dest='login',
            help='login to twitch.tv and acquire an access token',
            action='store_true',
            default=False
        )
        self.add_argument(
            '-q',
            dest='quiet',
            help='quiet',
            action='store_true',
            default=False
        )
        self.add_argument(
            '-v',
            action='version',
            version='%(prog)s - List online twitch channels v' + VERSION,
            help='display version information and exit'
        )

    def error(self, message):
        self.print_usage(sys.stderr)
        Log.error(message)
        sys.exit(1)


def channels_to_query(source, operands, stdin=None):
    file_channels = ChannelList.load(source, stdin=stdin)
    if file_channels is None and not operands:
        raise ConfigError("Cannot read channels file '{}'".format(source))
    return ChannelList.merge(file_channels, operands)


def list_channels(args, settings, terminal=None, contents=None, stdin=None):
    notices = Notices.suppress() if args.quiet else Notices.emit()
    token_store = TokenStore(settings.token_file)
    authorization = Authorization(settings, token_store, terminal=terminal)
    resolver = SessionResolver(settings, token_store, authorization, notices)

    session = resolver.login() if args.login else resolver.resolve()

    source = args.file if args.file else settings.channels_file
    channels = channels_to_query(source, args.channels, stdin=stdin)

    dependencies.require('requests')
    from twitch.streams import Streams  # imports requests
    streams = Streams(settings, contents) if contents else Streams(settings)
    return streams.query(session.token, args.long, channels)


def main(argv=None):
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    if hasattr(signal, 'SIGPIPE'):
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    args = CommandLineParser().parse_args(argv)
    try:
        output = list_channels(args, Settings.from_environment())
    except TwitchError as error:
        Log.fatal(str(error), error.exit_status)
    sys.stdout.write(output)
    sys.stdout.flush()


if __name__ == '__main__':
    main()
