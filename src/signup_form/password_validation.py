"""Password composition rules and the submit gate for the sign-up form."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from signup_form.enums import RuleId
from signup_form.exceptions import SubmitPreconditionError
from signup_form.schemas import FormState, RuleSet, RuleStatus, SubmitResult

logger = logging.getLogger(__name__)

MIN_LENGTH = 14
MAX_LENGTH = 50
SYMBOLS = "!@#$%^&*"


@dataclass(frozen=True)
class ValidationRule:
    """One catalog entry; `label` is display text only."""

    id: RuleId
    label: str
    predicate: Callable[[str], bool]


def _contains(pattern: str) -> Callable[[str], bool]:
    regex = re.compile(pattern)
    return lambda password: regex.search(password) is not None


# Display order
RULES: tuple[ValidationRule, ...] = (
    ValidationRule(RuleId.has_digit, "One number", _contains(r"[0-9]")),
    ValidationRule(RuleId.has_upper, "One uppercase letter", _contains(r"[A-Z]")),
    ValidationRule(RuleId.has_lower, "One lowercase letter", _contains(r"[a-z]")),
    ValidationRule(
        RuleId.has_symbol, "One symbol", _contains("[" + re.escape(SYMBOLS) + "]")
    ),
    ValidationRule(RuleId.has_latin_letter, "One Latin letter", _contains(r"[A-Za-z]")),
    ValidationRule(
        RuleId.length_range,
        f"Use {MIN_LENGTH}-{MAX_LENGTH} characters",
        lambda password: MIN_LENGTH <= len(password) <= MAX_LENGTH,
    ),
)

assert len({rule.id for rule in RULES}) == len(RULES), "Duplicate rule id in RULES"


def initial_rule_set() -> RuleSet:
    """Every rule unsatisfied, as shown before any input."""
    return RuleSet(
        rules=tuple(RuleStatus(id=rule.id, label=rule.label) for rule in RULES)
    )


def evaluate_password(password: str) -> RuleSet:
    """Evaluate every rule against the full password. Each rule is checked independently."""
    rule_set = RuleSet(
        rules=tuple(
            RuleStatus(id=rule.id, label=rule.label, satisfied=rule.predicate(password))
            for rule in RULES
        )
    )
    logger.debug(
        "Password evaluated: %d/%d rules satisfied",
        len(RULES) - len(rule_set.failing()),
        len(RULES),
    )
    return rule_set


def validate_password(password: str) -> list[str]:
    """Returns labels of failing rules (empty = valid)."""
    return [rule.label for rule in evaluate_password(password).rules if not rule.satisfied]


def evaluate_confirmation(password: str, confirmation: str) -> bool:
    return password == confirmation


def is_submittable(
    email: str, rule_set: RuleSet, password: str, confirmation: str
) -> bool:
    return (
        rule_set.all_satisfied
        and email.strip() != ""
        and password == confirmation
    )


def _blocking_reasons(
    email: str, rule_set: RuleSet, password: str, confirmation: str
) -> list[str]:
    reasons = [f"rule not satisfied: {rule_id.value}" for rule_id in rule_set.failing()]
    if email.strip() == "":
        reasons.append("email is empty")
    if password != confirmation:
        reasons.append("passwords do not match")
    return reasons


def submit(state: FormState, rule_set: RuleSet) -> SubmitResult:
    """Reset the form after a submit. Raises SubmitPreconditionError if the gate is closed.

    The gate is checked against rules re-evaluated from `state.password`; a
    `rule_set` that does not match them is rejected as stale.
    """
    current = evaluate_password(state.password)
    if rule_set != current:
        reasons = ["rule set is stale for the current password"]
    elif not is_submittable(
        state.email, current, state.password, state.confirm_password
    ):
        reasons = _blocking_reasons(
            state.email, current, state.password, state.confirm_password
        )
    else:
        reasons = []

    if reasons:
        logger.warning("Rejected submit: %s", "; ".join(reasons))
        raise SubmitPreconditionError(reasons)

    logger.info("Sign-up submitted: %s", state.email.strip())
    return SubmitResult(state=FormState(), rule_set=initial_rule_set(), notice=True)
