# DEPENDENCIES
from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application-wide settings: primary configuration source
    """
    # Application Info
    APP_NAME               : str   = "LegalLens Risk Engine"
    APP_VERSION            : str   = "1.0.0"
    API_PREFIX             : str   = "/api/v1"

    # Server Configuration
    HOST                   : str   = "0.0.0.0"
    PORT                   : int   = 8000
    RELOAD                 : bool  = False
    WORKERS                : int   = 1

    # CORS Settings
    CORS_ORIGINS           : list  = ["http://localhost:3000", "http://localhost:8000", "http://127.0.0.1:8000"]
    CORS_ALLOW_CREDENTIALS : bool  = True
    CORS_ALLOW_METHODS     : list  = ["*"]
    CORS_ALLOW_HEADERS     : list  = ["*"]

    # Input Limits
    MIN_TEXT_LENGTH        : int   = 50       # Minimum characters for analysis / summarization
    MAX_TEXT_LENGTH        : int   = 1000000  # Maximum characters accepted over HTTP
    MAX_FLOW_TEXT_LENGTH   : int   = 100000   # Maximum characters accepted for visualization (pairwise relationships)

    # Segmentation
    MIN_SENTENCE_LENGTH    : int   = 20       # Sentences must be strictly longer than this
    MIN_CLAUSE_LENGTH      : int   = 30       # Clause blocks must be strictly longer than this
    MAX_CLAUSE_BUFFER      : int   = 300      # Clause buffer is flushed once it exceeds this

    # Summarization
    SUMMARY_MAX_SENTENCES  : int   = 5
    SUMMARY_RATIO          : float = 0.3

    # Scoring / Visualization
    DEFAULT_RISK_SCORE     : int   = 30       # Score of a document without clauses
    NODE_TEXT_LIMIT        : int   = 100

    # Logging Settings
    LOG_LEVEL              : str   = "INFO"
    LOG_DIR                : Path  = Path("logs")
    APP_LOG_NAME           : str   = "legallens"


    class Config:
        env_file          = ".env"
        env_file_encoding = "utf-8"
        case_sensitive    = True
        extra             = "ignore"


# Global settings instance
settings = Settings()
