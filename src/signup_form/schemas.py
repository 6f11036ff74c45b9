"""Form state and rendered-output schemas."""

from pydantic import BaseModel, field_validator

from signup_form.enums import NoticeState, RuleId


class RuleStatus(BaseModel):
    id: RuleId
    label: str
    satisfied: bool = False

    model_config = {"frozen": True}


class RuleSet(BaseModel):
    """Evaluation of every catalog rule, in display order."""

    rules: tuple[RuleStatus, ...]

    model_config = {"frozen": True}

    @field_validator("rules")
    @classmethod
    def _catalog_order(cls, rules: tuple[RuleStatus, ...]) -> tuple[RuleStatus, ...]:
        if [rule.id for rule in rules] != list(RuleId):
            raise ValueError("rules must cover every RuleId exactly once, in display order")
        return rules

    @property
    def all_satisfied(self) -> bool:
        return all(rule.satisfied for rule in self.rules)

    def failing(self) -> list[RuleId]:
        return [rule.id for rule in self.rules if not rule.satisfied]

    def get(self, rule_id: RuleId) -> RuleStatus:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        raise KeyError(rule_id)


class FormState(BaseModel):
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    password_visible: bool = False

    model_config = {"frozen": True}


class SubmitResult(BaseModel):
    state: FormState
    rule_set: RuleSet
    notice: bool = True

    model_config = {"frozen": True}


class FormView(BaseModel):
    """Everything the UI layer renders for one form instance."""

    email: str
    password_visible: bool
    rules: list[RuleStatus]
    password_match: bool
    show_match_feedback: bool
    submittable: bool
    notice: NoticeState
