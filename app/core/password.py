"""Password hashing utilities."""

from pwdlib import PasswordHash

# Argon2 by default
password_hash = PasswordHash.recommended()

# Verified against when the account does not exist so both paths cost the same
DUMMY_HASH = password_hash.hash("dummy-password-for-timing")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check whether a plaintext password matches a stored hash.

    Returns:
        True if the password matches, False otherwise.
    """
    return password_hash.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a plaintext password with the recommended algorithm (Argon2).

    Parameters:
        password (str): Plaintext password to hash.

    Returns:
        str: Salted hash suitable for storage.
    """
    return password_hash.hash(password)
