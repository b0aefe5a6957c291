from collections import namedtuple

from twitch.constants import Twitch
from twitch.errors import ApiError
from util.contents import Contents, ContentError, ResponseError

StreamStatus = namedtuple('StreamStatus', 'user_name viewer_count title')

BOLD = '\033[1m'
RESET = '\033[m'


class Streams:
    def __init__(self, settings, contents=Contents):
        self.__settings = settings
        self.__contents = contents

    def headers(self, token):
        return {
            'Authorization': 'Bearer ' + token,
            'Client-ID': self.__settings.client_id,
        }

    def fetch(self, token, channels):
        """Fetches the live streams among ``channels`` with a single request.

        An empty list is not sent, since the endpoint answers it with
        unrelated top streams.
        """
        if not channels:
            return []
        try:
            response = self.__contents.json(
                self.__settings.api_url + Twitch.streams_path,
                params={'user_login': list(channels)},
                headers=self.headers(token),
                timeout=self.__settings.timeout,
            )
        except ResponseError as e:
            raise ApiError(str(e), status_code=e.status_code) from e
        except ContentError as e:
            raise ApiError(str(e)) from e
        return self.parse(response)

    @staticmethod
    def parse(response):
        if not isinstance(response, dict) or not isinstance(response.get('data'), list):
            raise ApiError('Unexpected response from the streams endpoint')
        try:
            return [
                StreamStatus(
                    user_name=stream['user_name'],
                    viewer_count=stream.get('viewer_count') or 0,
                    title=stream.get('title'),
                )
                for stream in response['data']
            ]
        except (KeyError, AttributeError, TypeError) as e:
            raise ApiError('Malformed stream in response: {}'.format(e)) from e

    def query(self, token, long_format, channels):
        streams = self.fetch(token, channels)
        if long_format:
            return StreamListing.long(streams)
        return StreamListing.compact(streams)


class StreamListing:
    no_title = 'no title'

    @staticmethod
    def viewers(count):
        return '{} {}'.format(count, 'viewer' if count == 1 else 'viewers')

    @classmethod
    def compact(cls, streams):
        return ''.join(
            '{name} {viewers} {link}\n'.format(
                name=stream.user_name,
                viewers=cls.viewers(stream.viewer_count),
                link=Twitch.channel_link.format(stream.user_name),
            )
            for stream in streams
        )

    @classmethod
    def long(cls, streams):
        return ''.join(
            '{bold}{name}{reset} ({viewers}) {link}\n{title}\n\n'.format(
                bold=BOLD,
                reset=RESET,
                name=stream.user_name,
                viewers=cls.viewers(stream.viewer_count),
                link=Twitch.channel_link.format(stream.user_name),
                title=cls.no_title if stream.title is None else stream.title,
            )
            for stream in streams
        )
