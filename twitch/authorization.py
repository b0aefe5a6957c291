import secrets
import string
from urllib.parse import urlencode

from twitch.constants import Twitch
from util.terminal import Terminal

ESC = '\033'


class Authorization:
    """Implicit-grant authorization driven by the operator.

    The redirect URI points at an address nothing listens on. The operator
    compares the state shown here with the one in the browser's address bar
    and pastes the ``access_token`` parameter back into the terminal.
    """
    state_length = 32
    __state_alphabet = string.ascii_letters + string.digits

    def __init__(self, settings, token_store, terminal=None):
        self.__settings = settings
        self.__token_store = token_store
        self.__terminal = terminal or Terminal()

    @classmethod
    def state(cls):
        return ''.join(
            secrets.choice(cls.__state_alphabet) for _ in range(cls.state_length)
        )

    def url(self, state):
        query = urlencode([
            ('client_id', self.__settings.client_id),
            ('response_type', 'token'),
            ('state', state),
            ('redirect_uri', self.__settings.redirect_uri),
            ('scope', ''),
            ('force_verify', 'true'),
        ])
        return self.__settings.auth_url + Twitch.authorize_path + '?' + query

    @staticmethod
    def instructions(url, state):
        return (
            "Visit the following link and press 'Authorize'. After authorizing, you\n"
            'will be redirected to a non-existing website.\n'
            '\n'
            '{esc}[4m{url}{esc}[0m\n'
            '\n'
            'From the current URL (in your web-browsers address bar), make sure the\n'
            "'state' parameter matches:\n"
            '\n'
            '{state}\n'
            '\n'
            "Then copy the 'access_token' parameter from the URL and enter it here.\n"
            '\n'
            'Enter token: '
        ).format(esc=ESC, url=url, state=state)

    def run(self):
        state = self.state()
        token = self.__terminal.prompt(self.instructions(self.url(state), state)).strip()
        self.__token_store.save(token)
        self.__terminal.write('\n')
        return token
