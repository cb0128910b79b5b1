"""Configuration management for sitemap-redirects."""

from pathlib import Path

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class Settings(BaseSettings):
    """Application settings.

    Values come from code only; environment variables and .env files in the
    working directory are never consulted.
    """

    # Paths (relative to the working directory)
    sitemap_path: Path = Path("sitemap.xml")
    output_path: Path = Path("django_redirects.txt")

    # File I/O
    encoding: str = "utf-8"

    model_config = {
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


settings = Settings()
