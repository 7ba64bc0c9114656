import logging
from typing import Dict, Optional, Union

from config.form import FormConfig
from signup.errors import InactiveMode
from signup.graph import SubmissionGraphFactory
from signup.mode import ModeSelector
from signup.state import (
    EMAIL,
    FIELD_SPECS,
    PERSONAL_FIELDS,
    ButtonView,
    FieldView,
    FormProps,
    FormView,
    Mode,
    SectionView,
    SubmitEvent,
    TabView,
)
from signup.store import FieldStore

logger = logging.getLogger(__name__)

MODE_LABELS = {
    Mode.PERSONAL: "Create Personal Profile",
    Mode.ORGANIZATION: "Create Organization Profile",
}

# (section title, field names) per mode, in display order
MODE_SECTIONS = {
    Mode.PERSONAL: ((None, (EMAIL,) + PERSONAL_FIELDS),),
    Mode.ORGANIZATION: (
        ("Your personal information", (EMAIL,) + PERSONAL_FIELDS),
        ("Organization's information", ("orgName", "website", "githubHandle", "twitterHandle")),
    ),
}


class ProfileFormController:
    """
    State controller for the personal / organization profile form.

    Owns the active mode and the field store for the lifetime of one
    mounted form. Everything the caller owns (email, errors, submitting
    flag and the callbacks) lives in ``props`` and is replaced through
    ``update_props``.
    """

    def __init__(self, props: FormProps, config: Optional[FormConfig] = None):
        self.props = props
        self.config = config or FormConfig()
        self.modes = ModeSelector()
        self.store = FieldStore(
            external_errors=props.errors,
            on_email_change=lambda value: self.props.on_email_change(value),
            get_email=lambda: self.props.email,
            font_size=self.config.font_size,
            line_height=self.config.line_height,
        )
        self.graph = SubmissionGraphFactory(
            on_personal_submit=lambda payload: self.props.on_personal_submit(payload),
            on_org_submit=lambda payload: self.props.on_org_submit(payload),
        ).compile()

    # props

    def update_props(self, **changes) -> FormProps:
        current = {name: getattr(self.props, name) for name in FormProps.model_fields}
        self.props = FormProps.model_validate({**current, **changes})
        if "errors" in changes:
            self.store.set_external_errors(self.props.errors)
        return self.props

    # mode selector

    @property
    def mode(self) -> Mode:
        return self.modes.mode

    def select_mode(self, mode: Union[Mode, str]) -> Mode:
        return self.modes.select_mode(mode)

    # field store

    def set_field(self, name: str, value: str) -> None:
        self.store.set_field(name, value)

    def set_email(self, value: str) -> None:
        self.store.set_email(value)

    def report_invalid(self, name: str, message: str) -> None:
        self.store.report_invalid(name, message)

    def effective_error(self, name: str) -> Optional[str]:
        return self.store.effective_error(name)

    def field_props(self, name: str):
        return self.store.field_props(name)

    # submission

    def submit_disabled(self, mode: Optional[Union[Mode, str]] = None) -> bool:
        mode = Mode(mode) if mode is not None else self.mode
        if self.props.submitting or not self.props.email:
            return True
        if mode is Mode.ORGANIZATION and not self.store.value("orgName"):
            return True
        return False

    def _submit(self, mode: Mode, event: Optional[SubmitEvent]) -> Optional[Dict[str, str]]:
        # no page navigation, ever
        if event is not None:
            event.prevent_default()

        if not self.modes.is_active(mode):
            raise InactiveMode(mode, self.mode)

        if self.submit_disabled(mode):
            logger.warning("Ignoring %s submit while the button is disabled", mode.value)
            return None

        result = self.graph.invoke(
            {
                "mode": mode,
                "values": dict(self.store.values),
                "email": self.props.email,
            }
        )
        return dict(result["payload"])

    def submit_personal(self, event: Optional[SubmitEvent] = None) -> Optional[Dict[str, str]]:
        return self._submit(Mode.PERSONAL, event)

    def submit_organization(self, event: Optional[SubmitEvent] = None) -> Optional[Dict[str, str]]:
        return self._submit(Mode.ORGANIZATION, event)

    def submit(self, event: Optional[SubmitEvent] = None) -> Optional[Dict[str, str]]:
        return self._submit(self.mode, event)

    def secondary_action(self) -> bool:
        if self.props.submitting:
            logger.warning("Ignoring secondary action while submitting")
            return False
        self.props.on_secondary_action()
        return True

    # view model

    def view(self) -> FormView:
        mode = self.mode
        tabs = [TabView(mode=m, label=MODE_LABELS[m], active=m is mode) for m in Mode]

        sections = []
        for title, names in MODE_SECTIONS[mode]:
            fields = [
                FieldView(
                    name=name,
                    label=FIELD_SPECS[name].label,
                    props=self.field_props(name),
                    error=self.effective_error(name),
                )
                for name in names
            ]
            sections.append(SectionView(title=title, fields=fields))

        return FormView(
            tabs=tabs,
            sections=sections,
            submit=ButtonView(
                label=MODE_LABELS[mode],
                disabled=self.submit_disabled(),
                loading=self.props.submitting,
            ),
            secondary=ButtonView(label="Sign In", disabled=self.props.submitting),
        )
