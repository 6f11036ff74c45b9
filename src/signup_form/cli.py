"""Terminal password checker.

Usage:
    signup-form-check                         # prompts for the password
    signup-form-check 'Abcdef1!ghijkl'        # password as argument
    signup-form-check --confirm               # also prompts for confirmation
"""

import argparse
import getpass
import logging
import sys

from signup_form.config import get_settings
from signup_form.password_validation import evaluate_confirmation, evaluate_password
from signup_form.schemas import RuleSet

CHECK = "✓"
BULLET = "•"


def render_checklist(rule_set: RuleSet) -> list[str]:
    return [
        f"{CHECK if rule.satisfied else BULLET} {rule.label}"
        for rule in rule_set.rules
    ]


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    parser = argparse.ArgumentParser(description="Check a password against the sign-up rules")
    parser.add_argument("password", nargs="?", help="Password to check (prompted if omitted)")
    parser.add_argument(
        "--confirm",
        action="store_true",
        help="Prompt for the confirmation entry and check that it matches",
    )
    args = parser.parse_args(argv)

    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")

    rule_set = evaluate_password(password)
    for line in render_checklist(rule_set):
        print(line)

    ok = rule_set.all_satisfied
    if args.confirm:
        confirmation = getpass.getpass("Confirm Password: ")
        if evaluate_confirmation(password, confirmation):
            print(f"{CHECK} Password Match")
        else:
            print(f"{BULLET} Password does not match")
            ok = False

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
