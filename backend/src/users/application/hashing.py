import asyncio

import bcrypt

from shared.config import settings
from shared.exceptions import HashingError

# bcrypt only reads this many bytes of the secret.
BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def _hash(password: str, rounds: int) -> str:
    return bcrypt.hashpw(_secret(password), bcrypt.gensalt(rounds=rounds)).decode()


async def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash with a fresh salt per call; bcrypt runs in a worker thread."""
    try:
        return await asyncio.to_thread(_hash, password, rounds or settings.BCRYPT_ROUNDS)
    except ValueError as exc:
        raise HashingError() from exc


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_secret(password), password_hash.encode())
