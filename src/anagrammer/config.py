"""
Settings shared by the server, the CLI and the default dictionary.

Values come from ANAGRAMMER_* environment variables:

  ANAGRAMMER_REDIS_HOST        localhost
  ANAGRAMMER_REDIS_PORT        6379
  ANAGRAMMER_REDIS_DB          0
  ANAGRAMMER_API_URL           http://localhost:8000/api
  ANAGRAMMER_DICTIONARY_PATH   /usr/share/dict/words
  ANAGRAMMER_LOG_LEVEL         INFO
  ANAGRAMMER_CORS_ORIGINS      (none; comma-separated list enables CORS)
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path


ENV_PREFIX = "ANAGRAMMER_"


@dataclass
class Settings:
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    api_url: str = "http://localhost:8000/api"
    dictionary_path: Path = Path("/usr/share/dict/words")
    log_level: str = "INFO"
    cors_origins: str = ""

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @classmethod
    def from_overrides(cls, **kwargs) -> "Settings":
        """Build settings ignoring None values (for argparse integration)."""
        filtered = {k: v for k, v in kwargs.items() if v is not None}
        return cls(**filtered)

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type in (int, "int"):
                overrides[f.name] = int(raw)
            elif f.type in (Path, "Path"):
                overrides[f.name] = Path(raw)
            else:
                overrides[f.name] = raw
        return cls.from_overrides(**overrides)
