from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "TaskHooks"
    # Base URL used for project and deployment links in messages
    app_url: str = "http://localhost:8000"
    debug: bool = False

    # When set, the build endpoint requires a matching X-API-Key header
    admin_api_key: str = ""

    # CORS — comma-separated allowed origins (empty = allow all for dev)
    cors_origins: str = ""

    # Message catalog used for subjects, labels and bodies
    locale: str = "en"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
