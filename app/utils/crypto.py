"""
Password hashing and token helpers
"""

import hashlib
import hmac
import secrets


def generate_salt() -> str:
    return secrets.token_hex(16)


def hash_password(password: str, salt: str = None, iterations: int = 100000) -> str:
    """Hash a password as ``<iterations>$<salt>$<hex digest>``"""
    if salt is None:
        salt = generate_salt()
    hashed = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{iterations}${salt}${hashed.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    parts = stored_hash.split("$")
    if len(parts) != 3 or not parts[0].isdigit():
        return False
    iterations, salt, _ = parts
    expected = hash_password(password, salt, int(iterations))
    return hmac.compare_digest(expected, stored_hash)


def generate_token() -> str:
    return secrets.token_urlsafe(32)
