from twitch.errors import ConfigError, InvalidInput
from util.persistent_resource import PersistentTextResource


class TokenStore:
    def __init__(self, token_file):
        self.__token_resource = PersistentTextResource(token_file)

    def load(self):
        line = self.__token_resource.first_line()
        if not line:
            return None
        fields = line.split()
        return fields[0] if fields else None

    def save(self, token):
        if not token or not token.strip():
            raise InvalidInput('Token is empty')
        try:
            self.__token_resource.store(token.strip())
        except OSError as e:
            raise ConfigError("Cannot write token file '{}': {}".format(
                self.__token_resource.file_name, e.strerror or e
            )) from e
