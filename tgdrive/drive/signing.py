import base64
import hashlib
import hmac
import posixpath
import time
from abc import abstractmethod
from typing import Protocol
from urllib.parse import quote


class Signer(Protocol):
    @abstractmethod
    def sign(self, data: str) -> str:
        ...


class HmacSigner(Signer):
    """`base64url(hmac_sha256(secret, "data:expire")):expire`, expire is 0 for never"""

    def __init__(self, secret: str, expire: int = 0) -> None:
        self._secret = secret.encode("utf-8")
        self._expire = expire

    def _expire_at(self) -> int:
        if self._expire <= 0:
            return 0

        return int(time.time()) + self._expire

    def sign(self, data: str) -> str:
        expire_at = self._expire_at()
        mac = hmac.new(
            self._secret,
            f"{data}:{expire_at}".encode("utf-8"),
            hashlib.sha256,
        )
        signature = base64.urlsafe_b64encode(mac.digest()).decode("ascii")

        return f"{signature}:{expire_at}"

    def verify(self, data: str, sign: str) -> bool:
        try:
            signature, expire_str = sign.rsplit(":", 1)
            expire_at = int(expire_str)
        except ValueError:
            return False

        if expire_at != 0 and expire_at < int(time.time()):
            return False

        expected = hmac.new(
            self._secret,
            f"{data}:{expire_at}".encode("utf-8"),
            hashlib.sha256,
        )

        return hmac.compare_digest(
            base64.urlsafe_b64encode(expected.digest()).decode("ascii"), signature
        )


def thumbnail_url(api_url: str, req_path: str, name: str, signer: Signer) -> str:
    path = posixpath.join("/", req_path.lstrip("/"), name)
    url = api_url.rstrip("/") + quote(posixpath.join("/p", path.lstrip("/")))

    return f"{url}?type=thumb&sign={quote(signer.sign(path), safe='')}"
