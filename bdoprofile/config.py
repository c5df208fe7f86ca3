"""Global settings for bdoprofile."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    base_url: str = "https://www.sa.playblackdesert.com"
    region: str = "SA"
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    impersonate: str = "chrome120"
    timeout: int = 10
    debug_output: Optional[str] = "debug_output.json"
    viewport_width: int = 80
    viewport_height: int = 20
    input_char_limit: int = 32


settings = Settings()
