from __future__ import annotations
import os
from pydantic import BaseModel, ConfigDict

PUNCTUATION = ".,?:;!"
TOP_K_DEFAULT = 5


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_k: int = int(os.getenv("LITTLESEARCH_TOP_K", str(TOP_K_DEFAULT)))
    punctuation: str = PUNCTUATION
    log_level: str = os.getenv("LITTLESEARCH_LOG_LEVEL", "INFO")
    data_dir: str = os.getenv("LITTLESEARCH_DATA_DIR", "data/raw")


settings = Settings()
