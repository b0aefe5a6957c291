import os
from collections import namedtuple

from twitch.constants import Twitch


class Settings(namedtuple(
    'Settings',
    'client_id api_url auth_url redirect_uri config_dir token_file channels_file env_token timeout'
)):
    __slots__ = ()

    @classmethod
    def from_environment(cls, environ=None, timeout=30):
        environ = os.environ if environ is None else environ
        config_dir = os.path.join(cls.config_home(environ), Twitch.config_prefix)
        return cls(
            client_id=Twitch.client_id,
            api_url=Twitch.api_url,
            auth_url=Twitch.auth_url,
            redirect_uri=Twitch.redirect_uri,
            config_dir=config_dir,
            token_file=os.path.join(config_dir, 'token'),
            channels_file=os.path.join(config_dir, 'channels'),
            env_token=environ.get(Twitch.token_variable, '').strip(),
            timeout=timeout,
        )

    @staticmethod
    def config_home(environ):
        return environ.get('XDG_CONFIG_HOME') \
               or environ.get('CONFIG_HOME') \
               or os.path.expanduser('~/.config')
