from importlib.util import find_spec

from twitch.errors import MissingDependency


def require(*modules):
    for module in modules:
        if find_spec(module) is None:
            raise MissingDependency(module)
