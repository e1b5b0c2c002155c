class StencilExprError(Exception):
    pass


class TemplateSyntaxError(StencilExprError):
    def __init__(self, token: str | None, message: str):
        super().__init__(f"{message} (token='{token}')")
        self.token = token
        self.message = message


class UnknownFilterError(TemplateSyntaxError):
    def __init__(self, name: str, token: str | None = None):
        super().__init__(
            token=token if token is not None else name,
            message=f"Unknown filter '{name}'",
        )
        self.name = name


class FilterError(StencilExprError):
    pass
