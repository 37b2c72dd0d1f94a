"""Signed token value."""

from pydantic import BaseModel, ConfigDict, SecretStr

from . import codec


class Token(BaseModel):
    """An encoded token paired with the secret that signs or verifies it.

    The secret is kept out of ``encoded`` and out of ``repr``.
    """

    model_config = ConfigDict(frozen=True)

    encoded: str
    secret: SecretStr

    def segments(self) -> tuple[str, str, str]:
        """Header, payload and signature segments.

        Raises:
            InvalidStructureError: If ``encoded`` is not three segments.
        """
        return codec.split(self.encoded)

    def get_secret(self) -> str:
        return self.secret.get_secret_value()

    def __str__(self) -> str:
        return self.encoded
