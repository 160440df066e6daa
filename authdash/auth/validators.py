"""
Form Validation

Registration and login forms are validated field by field; each validator
returns a list of error messages, empty when the input is acceptable.
"""

import re

USERNAME_MAX_LENGTH = 20
PASSWORD_MAX_LENGTH = 20

# local@domain.tld, no whitespace, at least one dot in the domain
EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@([A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"
)


def is_valid_email(email):
    return bool(email) and len(email) <= 254 and EMAIL_PATTERN.match(email) is not None


def _check_email(email, errors):
    if not email:
        errors.append('Email is required.')
    elif not is_valid_email(email):
        errors.append('Please provide a valid email address.')


def _check_password(password, errors):
    if not password:
        errors.append('Password is required.')
    elif len(password) > PASSWORD_MAX_LENGTH:
        errors.append(f'Password must be at most {PASSWORD_MAX_LENGTH} characters long.')


def validate_registration(username, email, password):
    """Validate registration input.
    
    Args:
        username: Alphanumeric, 1-20 characters
        email: Valid email address
        password: 1-20 characters
    
    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    if not username:
        errors.append('Username is required.')
    elif not username.isascii() or not username.isalnum():
        errors.append('Username may only contain letters and numbers.')
    elif len(username) > USERNAME_MAX_LENGTH:
        errors.append(f'Username must be at most {USERNAME_MAX_LENGTH} characters long.')
    _check_email(email, errors)
    _check_password(password, errors)
    return errors


def validate_login(email, password):
    """Validate the shape of login input; existence is checked separately."""
    errors = []
    _check_email(email, errors)
    _check_password(password, errors)
    return errors
