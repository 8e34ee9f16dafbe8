

class TextFieldTransError(Exception):
    """Base class for every error a pipeline stage can report."""


class AccessError(TextFieldTransError):
    """The accessibility layer could not read or write the focused element."""


class NoFocusedElement(AccessError):
    pass


class NoTextValue(AccessError):
    pass


class EmptyText(AccessError):
    pass


class WriteDenied(AccessError):
    def __init__(self, code):
        super().__init__(f"write denied by accessibility API (error {code})")
        self.code = code


class TranslateError(TextFieldTransError):
    """The translation endpoint did not produce a usable result."""


class InvalidEndpoint(TranslateError):
    pass


class NetworkError(TranslateError):
    pass


class EmptyResponse(TranslateError):
    pass
