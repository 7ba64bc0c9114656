class FormError(Exception):
    """Base class for profile form errors."""


class InvalidFieldName(FormError, KeyError):
    def __init__(self, name: str, allowed=None):
        self.name = name
        self.allowed = tuple(allowed or ())
        msg = f"Unknown form field: {name!r}"
        if self.allowed:
            msg += f" (expected one of {', '.join(self.allowed)})"
        super().__init__(msg)

    def __str__(self) -> str:
        return self.args[0]


class InactiveMode(FormError):
    """A submit entry point was called for the mode that is not shown."""

    def __init__(self, requested, active):
        self.requested = requested
        self.active = active
        super().__init__(f"Cannot submit {requested.value} form while {active.value} is active")
