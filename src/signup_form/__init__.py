"""Live password-rule validation for a sign-up form."""
