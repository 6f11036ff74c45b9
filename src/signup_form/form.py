"""Form controller: applies UI input events and owns the notice for one form."""

import logging

from signup_form.notice import TransientNotice
from signup_form.password_validation import (
    evaluate_confirmation,
    evaluate_password,
    initial_rule_set,
    is_submittable,
    submit,
)
from signup_form.schemas import FormState, FormView, RuleSet

logger = logging.getLogger(__name__)


class SignupForm:
    def __init__(self, notice: TransientNotice | None = None):
        self.state = FormState()
        self.rule_set: RuleSet = initial_rule_set()
        self.notice = notice or TransientNotice()

    def set_email(self, value: str) -> None:
        self.state = self.state.model_copy(update={"email": value})

    def set_password(self, value: str) -> None:
        self.state = self.state.model_copy(update={"password": value})
        self.rule_set = evaluate_password(value)

    def set_confirm_password(self, value: str) -> None:
        self.state = self.state.model_copy(update={"confirm_password": value})

    def toggle_password_visibility(self) -> None:
        self.state = self.state.model_copy(
            update={"password_visible": not self.state.password_visible}
        )

    @property
    def password_match(self) -> bool:
        # Derived on read so it always sees the latest password.
        return evaluate_confirmation(self.state.password, self.state.confirm_password)

    @property
    def submittable(self) -> bool:
        return is_submittable(
            self.state.email,
            self.rule_set,
            self.state.password,
            self.state.confirm_password,
        )

    def view(self) -> FormView:
        return FormView(
            email=self.state.email,
            password_visible=self.state.password_visible,
            rules=list(self.rule_set.rules),
            password_match=self.password_match,
            show_match_feedback=self.state.confirm_password != "",
            submittable=self.submittable,
            notice=self.notice.state,
        )

    def submit(self) -> None:
        """Raises SubmitPreconditionError and leaves state untouched if not submittable.

        Must be called from a running event loop, which owns the notice timer.
        """
        result = submit(self.state, self.rule_set)
        # show() raises without a running loop; nothing is reset in that case.
        if result.notice:
            self.notice.show()
        self.state = result.state
        self.rule_set = result.rule_set

    def close(self) -> None:
        self.notice.cancel()
        logger.debug("Form closed")
