from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "user_registry"
    MONGO_TIMEOUT_MS: int = 5000
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    BCRYPT_ROUNDS: int = 10
    EMPTY_LIST_IS_ERROR: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
