"""
Auth database configuration.
Stores user identity and credential data.
"""


class Collections:
    """Collection names in the auth database."""
    USERS = "users"
