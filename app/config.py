# app/config.py

from datetime import time
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    APP_NAME: str = "Barbershop Scheduling"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./barber.db"
    SQL_ECHO: bool = False

    # JWT Auth
    SECRET_KEY: str = "change-me-later"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Optional admin created on startup
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""

    # Shop hours
    SHOP_TIMEZONE: str = "America/Sao_Paulo"
    SLOT_MINUTES: int = Field(30, gt=0)
    MORNING_START: time = time(8, 0)
    MORNING_END: time = time(11, 30)
    AFTERNOON_START: time = time(14, 0)
    AFTERNOON_END: time = time(18, 30)
    CLOSED_WEEKDAYS: List[int] = [6]     # 0=Mon ... 6=Sun
    HALF_DAY_WEEKDAYS: List[int] = [5]   # morning block only
    SAME_DAY_CUTOFF: time = time(18, 30)


settings = Settings()
