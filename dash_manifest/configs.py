from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    mpd_min_buffer_time: float = 1.5  # Default minBufferTime (seconds) written to generated manifests.
    mpd_replace_ips: bool = False  # Whether to scrub ip=/ip/ markers in BaseURLs by default.

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
