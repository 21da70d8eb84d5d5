import os
from typing import Optional

DEFAULT_SESSION_SECRET = "user-session-web-static-secret"

CREDENTIAL_SCHEMES = ("bcrypt", "plaintext")
USER_ID_SCHEMES = ("sequential", "uuid")

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUTHY


class Settings:
    """
    Application settings loaded from environment variables.

    Every value has a default so the app starts with no environment at all.
    Invalid values raise ValueError when the settings are built.
    """

    def __init__(self) -> None:
        self.host: str = os.getenv("HOST", "0.0.0.0")
        port = os.getenv("PORT") or "8080"
        try:
            self.port: int = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}")

        # The cookie is signed, not encrypted; the default key is public.
        self.session_secret: str = os.getenv("SESSION_SECRET") or DEFAULT_SESSION_SECRET
        self.session_cookie: str = "session"

        self.credential_scheme: str = os.getenv("CREDENTIAL_SCHEME", "bcrypt").lower()
        if self.credential_scheme not in CREDENTIAL_SCHEMES:
            raise ValueError(f"Unsupported CREDENTIAL_SCHEME: {self.credential_scheme}")
        self.bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

        self.user_id_scheme: str = os.getenv("USER_ID_SCHEME", "sequential").lower()
        if self.user_id_scheme not in USER_ID_SCHEMES:
            raise ValueError(f"Unsupported USER_ID_SCHEME: {self.user_id_scheme}")

        # Unauthenticated debug listing; on by default only for plaintext.
        self.users_json_enabled: bool = _env_flag(
            "USERS_JSON_ENABLED", self.credential_scheme == "plaintext"
        )

        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.debug: bool = _env_flag("DEBUG", False)

    @property
    def uses_default_secret(self) -> bool:
        return self.session_secret == DEFAULT_SESSION_SECRET


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings, built once per process.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
