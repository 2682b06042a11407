"""
Secret strength validation.

Only enforced at registration when strong secrets are required by
configuration; the sample accounts use short demo secrets.

Example:
    from common.utils import validate_password

    is_valid, errors = validate_password("student123")
    if not is_valid:
        raise ValidationException("Weak password", errors=errors)
"""

import re
from typing import List, Tuple


def validate_password(
    password: str,
    min_length: int = 8,
    max_length: int = 128,
    require_uppercase: bool = True,
    require_lowercase: bool = True,
    require_digit: bool = True,
    require_special: bool = False,
    special_chars: str = r"!@#$%^&*(),.?\":{}|<>",
) -> Tuple[bool, List[str]]:
    """
    Validate secret strength.

    Args:
        password: The secret to validate
        min_length: Minimum length
        max_length: Maximum length
        require_uppercase: Require at least one uppercase letter
        require_lowercase: Require at least one lowercase letter
        require_digit: Require at least one digit
        require_special: Require at least one character from special_chars
        special_chars: Characters accepted as special

    Returns:
        Tuple of (is_valid, errors)

    Examples:
        >>> validate_password("Backpack42")
        (True, [])
        >>> validate_password("pack")[0]
        False
    """
    errors: List[str] = []

    if len(password) < min_length:
        errors.append(f"Password must be at least {min_length} characters")
    if len(password) > max_length:
        errors.append(f"Password must be no more than {max_length} characters")

    checks = [
        (require_uppercase, r"[A-Z]", "one uppercase letter"),
        (require_lowercase, r"[a-z]", "one lowercase letter"),
        (require_digit, r"\d", "one digit"),
        (require_special, f"[{re.escape(special_chars)}]", "one special character"),
    ]
    for required, pattern, label in checks:
        if required and not re.search(pattern, password):
            errors.append(f"Password must contain at least {label}")

    return len(errors) == 0, errors
