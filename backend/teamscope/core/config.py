from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Teamscope"
    API_V1_STR: str = "/api/v1"

    MONGODB_URL: str
    DATABASE_NAME: str = "teamscope"

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Sentinel team used for system-wide defaults, never user-addressable
    HIDDEN_TEAM_NAME: str = "portus_global_team_1"

    # Search Settings
    DIRECTORY_SEARCH_MIN_ROLE: str = "owner"
    SEARCH_MATCH_MODE: str = "substring"  # "substring" or "prefix"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
