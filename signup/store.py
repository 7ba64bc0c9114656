import logging
from typing import Callable, Dict, Iterable, Mapping, Optional

from signup.errors import InvalidFieldName
from signup.state import (
    EMAIL,
    ERROR_FIELDS,
    FIELD_SPECS,
    VALUE_FIELDS,
    ChangeEvent,
    DerivedInputProps,
    InvalidEvent,
)

logger = logging.getLogger(__name__)


class FieldStore:
    """
    Field values plus the two error sources for the profile form.

    External errors come from the caller (typically a rejected server
    submission) and always win over local ones. Local errors are recorded
    from native constraint failures and cleared when the field is edited.
    """

    def __init__(
        self,
        external_errors: Optional[Mapping[str, Optional[str]]] = None,
        on_email_change: Optional[Callable[[str], None]] = None,
        get_email: Optional[Callable[[], str]] = None,
        font_size: str = "Paragraph",
        line_height: str = "Paragraph",
    ):
        self.values: Dict[str, str] = {}
        self.local_errors: Dict[str, Optional[str]] = {}
        self.external_errors: Dict[str, Optional[str]] = dict(external_errors or {})
        self.on_email_change = on_email_change
        self.get_email = get_email or (lambda: "")
        self.font_size = font_size
        self.line_height = line_height

        # the initial external errors double as the starting local map
        for name, message in self.external_errors.items():
            if name in ERROR_FIELDS:
                self.local_errors[name] = message

    @staticmethod
    def _check(name: str, allowed: Iterable[str]) -> None:
        if name not in allowed:
            raise InvalidFieldName(name, allowed)

    def set_external_errors(self, errors: Optional[Mapping[str, Optional[str]]]) -> None:
        self.external_errors = dict(errors or {})

    def set_field(self, name: str, value: str) -> None:
        self._check(name, VALUE_FIELDS)
        self.values[name] = value
        self.local_errors[name] = None
        logger.debug("Field %s edited, local error cleared", name)

    def set_email(self, value: str) -> None:
        if self.on_email_change is not None:
            self.on_email_change(value)
        self.local_errors[EMAIL] = None
        logger.debug("Email edited, local error cleared")

    def report_invalid(self, name: str, message: str) -> None:
        self._check(name, ERROR_FIELDS)
        self.local_errors[name] = message
        logger.debug("Field %s reported invalid: %s", name, message)

    def effective_error(self, name: str) -> Optional[str]:
        self._check(name, ERROR_FIELDS)
        external = self.external_errors.get(name)
        # an empty external message counts as no error
        if external:
            return external
        return self.local_errors.get(name) or None

    def value(self, name: str) -> str:
        if name == EMAIL:
            return self.get_email() or ""
        self._check(name, VALUE_FIELDS)
        return self.values.get(name) or ""

    def pick(self, names: Iterable[str]) -> Dict[str, str]:
        return {name: self.value(name) for name in names}

    def on_change(self, event: ChangeEvent) -> None:
        if event.name == EMAIL:
            self.set_email(event.value)
        else:
            self.set_field(event.name, event.value)

    def on_invalid(self, event: InvalidEvent) -> None:
        # the controller renders the message itself
        event.prevent_default()
        self.report_invalid(event.name, event.validation_message)

    def field_props(self, name: str) -> DerivedInputProps:
        self._check(name, ERROR_FIELDS)
        spec = FIELD_SPECS[name]
        return DerivedInputProps(
            name=name,
            value=self.value(name),
            on_change=self.on_change,
            on_invalid=self.on_invalid,
            font_size=self.font_size,
            line_height=self.line_height,
            type=spec.input_type,
            width=1,
            required=spec.required,
            prefix=spec.prefix,
            placeholder=spec.placeholder,
        )
