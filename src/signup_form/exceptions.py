"""Form-level errors raised to the UI layer."""


class SignupFormError(Exception):
    """Base class for sign-up form errors."""


class SubmitPreconditionError(SignupFormError):
    """Submit was invoked while the form was not submittable."""

    def __init__(self, reasons: list[str]):
        self.reasons = reasons
        super().__init__("Form is not submittable: " + "; ".join(reasons))
