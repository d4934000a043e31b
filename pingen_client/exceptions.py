class PingenError(Exception):
    pass


class ConfigurationError(PingenError):
    pass


class TransportError(PingenError):
    pass


class DecodingError(PingenError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ServiceError(PingenError):
    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"{message} (code: {code})")
        self.code = code
        self.message = message
