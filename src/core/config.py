from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class LttiSettings(BaseSettings):
    page_size: int = 12
    session_dir: str = ".ltti_sessions"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix='LTTI_')

# Instantiate settings
settings = LttiSettings()

def get_settings() -> LttiSettings:
    return settings
