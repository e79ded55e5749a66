from pydantic_settings import BaseSettings

from prospector.services.gemini import MODEL, TEMPERATURE


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    gemini_api_key: str
    gemini_model: str = MODEL
    gemini_temperature: float = TEMPERATURE
    http_timeout: float = 60.0
    history_dir: str = ".prospector"
    history_capacity: int = 20
    log_level: str = "INFO"
