from __future__ import annotations

from pydantic_settings import BaseSettings

from foursquare.credentials import AppCredentials, Credentials, UserCredentials


class Settings(BaseSettings):
    host: str = "https://api.foursquare.com"
    api_version: str = "20170801"
    client_id: str = ""
    client_secret: str = ""
    oauth_token: str = ""
    timeout: float = 30.0
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "FS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def credentials(self) -> Credentials | None:
        """User token wins over an app id/secret pair; *None* when neither is set."""
        if self.oauth_token:
            return UserCredentials(self.oauth_token)
        if self.client_id and self.client_secret:
            return AppCredentials(self.client_id, self.client_secret)
        return None


settings = Settings()
