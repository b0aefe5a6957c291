import io
from urllib.parse import parse_qs, urlsplit

import pytest

from twitch.authorization import Authorization
from twitch.errors import AuthCancelled, InvalidInput
from twitch.settings import Settings
from twitch.token import TokenStore
from util.terminal import Terminal


class FakeTerminal:
    def __init__(self, answer=None, error=None):
        self.answer = answer
        self.error = error
        self.written = []

    def write(self, text):
        self.written.append(text)

    def prompt(self, text):
        self.written.append(text)
        if self.error:
            raise self.error
        return self.answer


@pytest.fixture
def settings(tmp_path):
    return Settings.from_environment({'XDG_CONFIG_HOME': str(tmp_path)})


def test_state_is_32_alphanumeric_characters():
    state = Authorization.state()
    assert len(state) == 32
    assert state.isalnum()


def test_state_differs_between_runs():
    assert Authorization.state() != Authorization.state()


def test_url_requests_implicit_grant(settings):
    authorization = Authorization(settings, TokenStore(settings.token_file), FakeTerminal())
    url = authorization.url('s' * 32)
    parts = urlsplit(url)
    query = parse_qs(parts.query, keep_blank_values=True)
    assert url.startswith('https://id.twitch.tv/oauth2/authorize?client_id=')
    assert query == {
        'client_id': [settings.client_id],
        'response_type': ['token'],
        'state': ['s' * 32],
        'redirect_uri': ['https://127.0.0.1:65010'],
        'scope': [''],
        'force_verify': ['true'],
    }


def test_run_stores_pasted_token(settings):
    terminal = FakeTerminal(answer='  pasted-token \n')
    store = TokenStore(settings.token_file)
    token = Authorization(settings, store, terminal).run()
    assert token == 'pasted-token'
    assert store.load() == 'pasted-token'


def test_run_shows_url_and_state(settings, monkeypatch):
    monkeypatch.setattr(Authorization, 'state', classmethod(lambda cls: 'X' * 32))
    terminal = FakeTerminal(answer='token')
    Authorization(settings, TokenStore(settings.token_file), terminal).run()
    shown = ''.join(terminal.written)
    assert 'state=' + 'X' * 32 in shown
    assert '\n' + 'X' * 32 + '\n' in shown
    assert shown.endswith('Enter token: \n')


def test_run_with_blank_token_fails(settings):
    store = TokenStore(settings.token_file)
    with pytest.raises(InvalidInput):
        Authorization(settings, store, FakeTerminal(answer='   ')).run()
    assert store.load() is None


def test_run_without_input_is_cancelled(settings):
    terminal = FakeTerminal(error=AuthCancelled('No input given'))
    with pytest.raises(AuthCancelled):
        Authorization(settings, TokenStore(settings.token_file), terminal).run()


def test_terminal_reads_from_device_not_stdin(tmp_path, monkeypatch):
    device = tmp_path / 'tty'
    device.write_text('from-tty\n')
    monkeypatch.setattr('sys.stdin', io.StringIO('from-stdin\n'))
    output = io.StringIO()
    line = Terminal(device=str(device), output=output).prompt('Enter token: ')
    assert line == 'from-tty'
    assert output.getvalue() == 'Enter token: '


def test_terminal_end_of_input_is_cancelled(tmp_path):
    device = tmp_path / 'tty'
    device.write_text('')
    with pytest.raises(AuthCancelled):
        Terminal(device=str(device), output=io.StringIO()).prompt('Enter token: ')


def test_terminal_unavailable_is_cancelled(tmp_path):
    with pytest.raises(AuthCancelled):
        Terminal(device=str(tmp_path / 'missing'), output=io.StringIO()).prompt('> ')
