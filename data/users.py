"""Konta Sauce Demo — wszystkie mają to samo hasło."""

from dataclasses import dataclass

VALID_PASSWORD = "secret_sauce"


@dataclass(frozen=True)
class User:
    username: str
    password: str
    description: str = ""


STANDARD = User("standard_user", VALID_PASSWORD, "Pełny dostęp")
LOCKED_OUT = User("locked_out_user", VALID_PASSWORD, "Konto zablokowane")
PROBLEM = User("problem_user", VALID_PASSWORD, "Błędne obrazki i formularze")
PERFORMANCE_GLITCH = User("performance_glitch_user", VALID_PASSWORD, "Wolne logowanie")
ERROR = User("error_user", VALID_PASSWORD, "Błędy przy akcjach")
VISUAL = User("visual_user", VALID_PASSWORD, "Błędy wizualne")
INVALID = User("invalid_user", "wrong_password", "Nieistniejące konto")

# Konta istniejące w sklepie (bez INVALID)
USERS = {u.username: u for u in (STANDARD, LOCKED_OUT, PROBLEM, PERFORMANCE_GLITCH, ERROR, VISUAL)}


ERROR_MESSAGES = {
    'locked_out':           'Epic sadface: Sorry, this user has been locked out.',
    'invalid_credentials':  'Epic sadface: Username and password do not match any user in this service',
    'username_required':    'Epic sadface: Username is required',
    'password_required':    'Epic sadface: Password is required',
    'first_name_required':  'Error: First Name is required',
    'last_name_required':   'Error: Last Name is required',
    'postal_code_required': 'Error: Postal Code is required',
}


def expected_login_error(username: str, password: str) -> str | None:
    """Komunikat który sklep powinien pokazać dla danej pary, None = logowanie OK."""
    if not username:
        return ERROR_MESSAGES['username_required']
    if not password:
        return ERROR_MESSAGES['password_required']
    user = USERS.get(username)
    if user is None or user.password != password:
        return ERROR_MESSAGES['invalid_credentials']
    if user is LOCKED_OUT:
        return ERROR_MESSAGES['locked_out']
    return None
