# This project was developed with assistance from AI tools.
"""Username and password synthesis for new logins.

Branch usernames are derived, not chosen: ``State Bank`` + ``Main`` gives
``stateb_main``. Distinct branches can derive the same username; nothing
here checks for that.
"""

import re
import secrets
import string

BRANCH_PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "@#$%"
DEPARTMENT_PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
PASSWORD_LENGTH = 12
CODE_LENGTH = 6

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def _code(name: str) -> str:
    return _NON_ALNUM.sub("", name.lower())[:CODE_LENGTH]


def generate_username(bank_name: str, branch_name: str) -> str:
    """Derive a branch login from its bank and branch names.

    Each name is lowercased, stripped to ``[a-z0-9]`` and cut to six
    characters; the two codes are joined with an underscore.
    """
    return f"{_code(bank_name)}_{_code(branch_name)}"


def generate_password(
    length: int = PASSWORD_LENGTH, alphabet: str = BRANCH_PASSWORD_ALPHABET
) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_department_password() -> str:
    """Suggested password for the admin's new-department form (letters and digits only)."""
    return generate_password(alphabet=DEPARTMENT_PASSWORD_ALPHABET)
