import os
import base64
import binascii

from dotenv import load_dotenv
from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

load_dotenv()

SCHEME = "scrypt"


class ScryptPasswordHasher:
    """
    One-way salted password hashing on top of scrypt. The encoded hash carries
    its own cost parameters and salt:

        scrypt$<n>$<r>$<p>$<salt b64>$<digest b64>
    """

    DIGEST_BYTES = 32

    def __init__(self, n: int = 2**14, r: int = 8, p: int = 1, salt_bytes: int = 16):
        if n < 2 or n & (n - 1) != 0:
            raise ValueError(f"scrypt n must be a power of 2 greater than 1. Got {n}.")
        if r < 1 or p < 1:
            raise ValueError("scrypt r and p must be positive")
        self.n = n
        self.r = r
        self.p = p
        self.salt_bytes = salt_bytes

    @classmethod
    def from_env(cls) -> "ScryptPasswordHasher":
        return cls(
            n=int(os.getenv("PASSWORD_SCRYPT_N", "16384")),
            r=int(os.getenv("PASSWORD_SCRYPT_R", "8")),
            p=int(os.getenv("PASSWORD_SCRYPT_P", "1")),
        )

    @classmethod
    def _kdf(cls, salt: bytes, n: int, r: int, p: int) -> Scrypt:
        return Scrypt(salt=salt, length=cls.DIGEST_BYTES, n=n, r=r, p=p)

    def hash(self, plaintext: str) -> str:
        salt = os.urandom(self.salt_bytes)
        digest = self._kdf(salt, self.n, self.r, self.p).derive(plaintext.encode("utf-8"))
        salt_b64 = base64.b64encode(salt).decode("ascii")
        digest_b64 = base64.b64encode(digest).decode("ascii")
        return f"{SCHEME}${self.n}${self.r}${self.p}${salt_b64}${digest_b64}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            scheme, n, r, p, salt_b64, digest_b64 = hashed.split("$")
            if scheme != SCHEME:
                return False
            salt = base64.b64decode(salt_b64, validate=True)
            expected = base64.b64decode(digest_b64, validate=True)
            kdf = self._kdf(salt, int(n), int(r), int(p))
        except (ValueError, binascii.Error):
            return False

        try:
            kdf.verify(plaintext.encode("utf-8"), expected)
        except InvalidKey:
            return False
        return True
