import logging

from config.form import FormConfig
from signup.controller import ProfileFormController
from signup.state import ChangeEvent, FormProps, InvalidEvent, SubmitEvent


def main():
    cfg = FormConfig.from_env()
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    submitted = []

    def on_email_change(value):
        form.update_props(email=value)

    props = FormProps(
        on_personal_submit=lambda payload: submitted.append(("personal", payload)),
        on_org_submit=lambda payload: submitted.append(("organization", payload)),
        on_secondary_action=lambda: print("-> sign in"),
        on_email_change=on_email_change,
        errors={"orgName": "Name taken"},
    )
    form = ProfileFormController(props, config=cfg)

    print("mode:", form.mode.value, "| submit disabled:", form.view().submit.disabled)

    form.field_props("email").on_change(ChangeEvent(name="email", value="a@b.com"))
    form.field_props("firstName").on_change(ChangeEvent(name="firstName", value="Ada"))
    form.field_props("website").on_invalid(
        InvalidEvent(name="website", validation_message="Please enter a URL.")
    )
    print("submit disabled:", form.view().submit.disabled)
    print("website error:", form.effective_error("website"))

    form.select_mode("organization")
    form.set_field("orgName", "Analytical Engines")
    print("orgName error (external):", form.effective_error("orgName"))
    form.update_props(errors={})
    print("orgName error (cleared by caller):", form.effective_error("orgName"))

    form.submit(SubmitEvent())

    for mode, payload in submitted:
        print(f"\nSUBMIT {mode}")
        for key, value in payload.items():
            print(f"  {key}: {value!r}")

    form.secondary_action()


if __name__ == "__main__":
    main()
