from typing import Optional


class FetchLifecycleError(Exception):
    """Base exception for fetch lifecycle errors."""
    pass


class FetchConfigError(FetchLifecycleError):
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class SingleChildError(FetchLifecycleError):
    def __init__(self, value: object):
        msg = f"children must return exactly one value, got {type(value).__name__}"
        super().__init__(msg)
        self.value = value


class LifecycleError(FetchLifecycleError):
    def __init__(self, event: str, state: str):
        msg = f"Cannot handle '{event}' while controller is {state}"
        super().__init__(msg)
        self.event = event
        self.state = state
