import pytest

from signup.controller import ProfileFormController
from signup.state import FormProps


class Calls:
    def __init__(self):
        self.personal = []
        self.org = []
        self.secondary = 0
        self.emails = []


@pytest.fixture
def calls():
    return Calls()


@pytest.fixture
def make_form(calls):
    def _make(**overrides):
        holder = {}

        def on_email_change(value):
            calls.emails.append(value)
            holder["form"].update_props(email=value)

        def on_secondary_action():
            calls.secondary += 1

        props = FormProps(
            on_personal_submit=calls.personal.append,
            on_org_submit=calls.org.append,
            on_secondary_action=on_secondary_action,
            on_email_change=on_email_change,
            **overrides,
        )
        holder["form"] = ProfileFormController(props)
        return holder["form"]

    return _make


@pytest.fixture
def form(make_form):
    return make_form()
