"""Secret strength policy."""

from .config import config
from .exceptions import WeakSecretError


class SecretPolicy:
    """Minimum-strength rules for signing secrets.

    Passing the policy is a recommendation, not a cryptographic guarantee.
    Instances hold only their settings, so one policy may be shared freely.
    """

    def __init__(
        self,
        min_length: int | None = None,
        special_characters: str | None = None,
        require_mixed_case: bool | None = None,
    ) -> None:
        settings = config.secret_policy
        self.min_length = settings.min_length if min_length is None else min_length
        self.special_characters = (
            settings.special_characters if special_characters is None else special_characters
        )
        self.require_mixed_case = (
            settings.require_mixed_case if require_mixed_case is None else require_mixed_case
        )

    def validate(self, secret: str) -> None:
        """Raise WeakSecretError naming the first rule the secret breaks."""
        if len(secret) < self.min_length:
            raise WeakSecretError(
                f"Secret must be at least {self.min_length} characters long"
            )
        if not any(c.isalpha() for c in secret):
            raise WeakSecretError("Secret must contain a letter")
        if self.require_mixed_case and not (
            any(c.isupper() for c in secret) and any(c.islower() for c in secret)
        ):
            raise WeakSecretError("Secret must contain upper and lower case letters")
        if not any(c.isdigit() for c in secret):
            raise WeakSecretError("Secret must contain a digit")
        if not any(c in self.special_characters for c in secret):
            raise WeakSecretError(
                f"Secret must contain one of {self.special_characters}"
            )

    def is_valid(self, secret: str) -> bool:
        try:
            self.validate(secret)
        except WeakSecretError:
            return False
        return True
