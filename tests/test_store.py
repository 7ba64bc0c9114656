import pytest

from signup.errors import FormError, InvalidFieldName
from signup.state import ERROR_FIELDS, VALUE_FIELDS, ChangeEvent, InvalidEvent
from signup.store import FieldStore


@pytest.mark.parametrize("name", VALUE_FIELDS)
def test_set_field_clears_local_error(name):
    store = FieldStore()
    store.report_invalid(name, "required")

    store.set_field(name, "x")

    assert store.value(name) == "x"
    assert store.effective_error(name) is None


@pytest.mark.parametrize("name", VALUE_FIELDS)
def test_set_field_keeps_external_error(name):
    store = FieldStore(external_errors={name: "server says no"})

    store.set_field(name, "x")

    assert store.effective_error(name) == "server says no"


@pytest.mark.parametrize("name", ERROR_FIELDS)
def test_report_invalid_without_external_error(name):
    store = FieldStore()

    store.report_invalid(name, "first")
    store.report_invalid(name, "second")

    assert store.effective_error(name) == "second"


def test_external_error_wins_over_local():
    store = FieldStore(external_errors={"website": "bad site"})
    store.report_invalid("website", "Please enter a URL.")

    assert store.effective_error("website") == "bad site"

    store.set_external_errors({"website": None})
    assert store.effective_error("website") == "Please enter a URL."


def test_initial_external_errors_seed_local_map():
    store = FieldStore(external_errors={"lastName": "too long", "nickname": "ignored"})

    assert store.local_errors == {"lastName": "too long"}

    # once the caller drops the prop the seeded local copy still shows until edited
    store.set_external_errors({})
    assert store.effective_error("lastName") == "too long"
    store.set_field("lastName", "Lovelace")
    assert store.effective_error("lastName") is None


def test_set_email_delegates_and_clears_local_error():
    seen = []
    store = FieldStore(on_email_change=seen.append)
    store.report_invalid("email", "required")

    store.set_email("a@b.com")

    assert seen == ["a@b.com"]
    assert store.effective_error("email") is None
    assert "email" not in store.values


def test_unknown_field_names_fail_fast():
    store = FieldStore()

    with pytest.raises(InvalidFieldName):
        store.set_field("nickname", "x")
    with pytest.raises(InvalidFieldName):
        store.set_field("email", "a@b.com")
    with pytest.raises(InvalidFieldName):
        store.report_invalid("nickname", "required")
    with pytest.raises(InvalidFieldName):
        store.effective_error("nickname")
    with pytest.raises(FormError):
        store.field_props("nickname")

    assert store.values == {}
    assert store.local_errors == {}


def test_invalid_field_name_is_a_key_error():
    with pytest.raises(KeyError) as exc:
        FieldStore().set_field("nickname", "x")

    assert "nickname" in str(exc.value)


def test_field_props_defaults():
    store = FieldStore(font_size="Small", line_height="Small")

    props = store.field_props("firstName")

    assert props.value == ""
    assert props.type == "text"
    assert props.width == 1
    assert props.font_size == "Small"
    assert props.line_height == "Small"
    assert props.required is False


def test_field_props_follow_field_declarations():
    store = FieldStore(get_email=lambda: "a@b.com")

    assert store.field_props("email").type == "email"
    assert store.field_props("email").value == "a@b.com"
    assert store.field_props("email").required is True
    assert store.field_props("orgName").required is True
    assert store.field_props("website").type == "url"
    assert store.field_props("githubHandle").prefix == "github.com/"
    assert store.field_props("twitterHandle").prefix == "@"


def test_field_props_handlers_update_store():
    store = FieldStore()
    props = store.field_props("orgName")

    props.on_change(ChangeEvent(name="orgName", value="Acme"))
    assert store.field_props("orgName").value == "Acme"

    event = InvalidEvent(name="orgName", validation_message="Please fill out this field.")
    props.on_invalid(event)

    assert event.default_prevented
    assert store.effective_error("orgName") == "Please fill out this field."


def test_change_event_for_email_goes_to_callback():
    seen = []
    store = FieldStore(on_email_change=seen.append)

    store.on_change(ChangeEvent(name="email", value="x@y.z"))

    assert seen == ["x@y.z"]
    assert store.values == {}


def test_empty_external_error_does_not_hide_local_error():
    store = FieldStore(external_errors={"email": ""})

    store.report_invalid("email", "required")

    assert store.effective_error("email") == "required"
