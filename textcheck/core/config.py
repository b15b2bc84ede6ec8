from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env wird automatisch gelesen
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "TextCheckAPI"
    environment: str = "dev"
    log_level: str = "INFO"

    # Obergrenze pro Request; größere Texte werden mit 413 abgelehnt
    max_text_chars: int = 100_000

    # Basis für die geschätzte Lesezeit
    words_per_minute: int = 200


settings = Settings()
