"""
passgen.errors
Exceptions raised by the generator and the configuration loader.
"""


class PasswordGeneratorError(Exception):
    """Base class for every error raised by passgen."""


class PasswordGenerationError(PasswordGeneratorError, ValueError):
    """The requested password cannot be built from the given options."""


class InvalidLengthError(PasswordGenerationError):
    pass


class OutOfRangeError(PasswordGenerationError):
    def __init__(self, length: int, min_length: int, max_length: int):
        super().__init__(f"password length must be between {min_length} and {max_length}")
        self.length = length
        self.min_length = min_length
        self.max_length = max_length


class EmptyAlphabetError(PasswordGenerationError):
    pass


class RandomSourceError(PasswordGeneratorError):
    """The operating system entropy source failed."""


class ConfigError(PasswordGeneratorError):
    pass
