from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    top_k: int = int(os.getenv("TOP_K", 8))
    edge_threshold: float = float(os.getenv("EDGE_THRESHOLD", 0.1))
    sum_tolerance: float = float(os.getenv("SUM_TOLERANCE", 1e-6))
    max_input_length: int = int(os.getenv("MAX_INPUT_LENGTH", 10000))
    api_key: str | None = os.getenv("API_KEY")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cli_log_level: str = os.getenv("CLI_LOG_LEVEL", "WARNING")
    log_file: str | None = os.getenv("LOG_FILE")
    log_json: bool = os.getenv("LOG_JSON", "true").lower() not in ("0", "false", "no")

settings = Settings()
