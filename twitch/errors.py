class TwitchError(Exception):
    exit_status = 1


class InvalidInput(TwitchError):
    pass


class AuthCancelled(TwitchError):
    pass


class AuthRequired(TwitchError):
    pass


class MissingDependency(TwitchError):
    def __init__(self, name):
        super().__init__('Missing dependency: {}'.format(name))
        self.name = name


class ApiError(TwitchError):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(TwitchError):
    pass
