from collections import namedtuple
from enum import Enum

from twitch.errors import AuthCancelled, AuthRequired, InvalidInput


class Origin(Enum):
    ENVIRONMENT = 'environment'
    STORED_FILE = 'stored-file'
    FRESHLY_AUTHORIZED = 'freshly-authorized'


Session = namedtuple('Session', 'token origin')


class SessionResolver:
    """Finds the access token for this run.

    The environment override wins, then the stored token, and only when both
    are empty does the interactive authorization run.
    """

    def __init__(self, settings, token_store, authorization, notices):
        self.__env_token = settings.env_token
        self.__token_store = token_store
        self.__authorization = authorization
        self.__notices = notices

    def resolve(self) -> Session:
        if self.__env_token:
            return Session(self.__env_token, Origin.ENVIRONMENT)
        stored = self.__token_store.load()
        if stored:
            return Session(stored, Origin.STORED_FILE)
        self.__notices.notify('Starting auth process because of missing access token')
        return self.login()

    def login(self) -> Session:
        try:
            token = self.__authorization.run()
        except (AuthCancelled, InvalidInput) as e:
            raise AuthRequired('Authorization failed: {}'.format(e)) from e
        return Session(token, Origin.FRESHLY_AUTHORIZED)
