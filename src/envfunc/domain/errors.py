"""Domain errors."""


class EnvFuncError(Exception):
    """Base error."""
    pass


class EnvNotRegisteredError(EnvFuncError):
    """Variable was never registered for the requested type."""

    def __init__(self, name: str, env_type: str = ""):
        self.name = name
        self.env_type = env_type
        super().__init__(f"env: {name} does not register")


class EnvParseError(EnvFuncError):
    """Raw environment value could not be parsed to the declared type."""

    def __init__(self, name: str, raw: str, env_type: str, reason: str = ""):
        self.name = name
        self.raw = raw
        self.env_type = env_type
        self.reason = reason
        message = f"env: {name}={raw!r} is not a valid {env_type}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class FunctionCallError(EnvFuncError):
    """Expression function called with the wrong arguments."""
    pass
