from typing import Any, Iterable


class ChainException(ValueError):
    pass


class ValidationError(ChainException):
    pass


class MissingRequiredFields(ValidationError):
    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__("Missing required fields: " + ", ".join(self.missing))


class InvalidIndexType(ValidationError):
    def __init__(self, path: str, value: Any):
        self.path = path
        self.value = value
        super().__init__(f"Invalid index type: {type(value).__name__} (path '{path}')")


class NotFoundError(ChainException, LookupError):
    pass


class ChainKeyNotFound(NotFoundError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Chain key "{path}" does not exist')


class ChainNotFound(NotFoundError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Chain '{value}' not found")


class ChainListNotFound(NotFoundError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Chain list '{name}' not found")


class UnsupportedChainError(ChainException):
    def __init__(self, value: Any, list_name: str = None):
        self.value = value
        self.list_name = list_name
        message = f"Chain '{value}' is not supported"
        if list_name is not None:
            message += f" by chain list '{list_name}'"
        super().__init__(message)
