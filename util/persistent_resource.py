import os
from os import path


class PersistentTextResource:
    def __init__(self, file_name):
        self.__file_name = path.expanduser(file_name)

    @property
    def file_name(self):
        return self.__file_name

    def first_line(self):
        try:
            with open(self.__file_name, 'r') as resource_file:
                return resource_file.readline()
        except (OSError, UnicodeDecodeError):
            return None

    def store(self, line):
        directory = path.dirname(self.__file_name)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.__file_name, 'w') as resource_file:
            resource_file.write(line + '\n')

