from enum import Enum
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Mode(str, Enum):
    PERSONAL = "personal"
    ORGANIZATION = "organization"


EMAIL = "email"

PERSONAL_FIELDS = ("firstName", "lastName")
ORGANIZATION_FIELDS = PERSONAL_FIELDS + ("orgName", "website", "githubHandle", "twitterHandle")

# email is owned by the caller, so it only appears in the error maps
VALUE_FIELDS = ORGANIZATION_FIELDS
ERROR_FIELDS = (EMAIL,) + VALUE_FIELDS

MODE_FIELDS: Dict[Mode, tuple] = {
    Mode.PERSONAL: PERSONAL_FIELDS,
    Mode.ORGANIZATION: ORGANIZATION_FIELDS,
}


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    input_type: str = "text"
    required: bool = False
    prefix: Optional[str] = None
    placeholder: Optional[str] = None


FIELD_SPECS: Dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (
        FieldSpec(
            name=EMAIL,
            label="Email",
            input_type="email",
            required=True,
            placeholder="i.e. yourname@yourhost.com",
        ),
        FieldSpec(name="firstName", label="First Name"),
        FieldSpec(name="lastName", label="Last Name"),
        FieldSpec(
            name="orgName",
            label="Org Name",
            required=True,
            placeholder="i.e. AirBnb, Women Who Code",
        ),
        FieldSpec(name="website", label="Website", input_type="url"),
        FieldSpec(name="githubHandle", label="GitHub (optional)", prefix="github.com/"),
        FieldSpec(name="twitterHandle", label="Twitter (optional)", prefix="@"),
    )
}


class FormProps(BaseModel):
    """Inputs owned by the surrounding application."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    on_personal_submit: Callable[[dict], None]
    on_org_submit: Callable[[dict], None]
    on_secondary_action: Callable[[], None]
    on_email_change: Callable[[str], None]
    email: str = ""
    errors: Dict[str, Optional[str]] = Field(default_factory=dict)
    submitting: bool = False


class _EnvironmentEvent(BaseModel):
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class ChangeEvent(_EnvironmentEvent):
    name: str
    value: str


class InvalidEvent(_EnvironmentEvent):
    name: str
    validation_message: str


class SubmitEvent(_EnvironmentEvent):
    pass


class DerivedInputProps(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    value: str = ""
    on_change: Callable[[ChangeEvent], None]
    on_invalid: Callable[[InvalidEvent], None]
    font_size: str = "Paragraph"
    line_height: str = "Paragraph"
    type: str = "text"
    width: int = 1
    required: bool = False
    prefix: Optional[str] = None
    placeholder: Optional[str] = None


class PersonalPayload(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str


class OrganizationPayload(PersonalPayload):
    org_name: str = Field(default="", alias="orgName")
    website: str = ""
    github_handle: str = Field(default="", alias="githubHandle")
    twitter_handle: str = Field(default="", alias="twitterHandle")


PAYLOAD_MODELS = {
    Mode.PERSONAL: PersonalPayload,
    Mode.ORGANIZATION: OrganizationPayload,
}


class SubmissionState(BaseModel):
    """State flowing through the submission graph."""

    mode: Mode
    values: Dict[str, str] = Field(default_factory=dict)
    email: str = ""
    payload: Optional[Dict[str, str]] = None
    dispatched: bool = False


class ButtonView(BaseModel):
    label: str
    disabled: bool = False
    loading: bool = False


class TabView(BaseModel):
    mode: Mode
    label: str
    active: bool


class FieldView(BaseModel):
    name: str
    label: str
    props: DerivedInputProps
    error: Optional[str] = None


class SectionView(BaseModel):
    title: Optional[str] = None
    fields: List[FieldView] = Field(default_factory=list)


class FormView(BaseModel):
    tabs: List[TabView]
    sections: List[SectionView]
    submit: ButtonView
    secondary: ButtonView
    secondary_prompt: str = "Already have an account?"
