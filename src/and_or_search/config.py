# config.py
# Runtime settings for the search, read from the environment (and .env).

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()


def _env(name: str) -> str | None:
    """Value of `name` stripped and lower-cased; unset and blank both give None."""
    value = os.getenv(name, "").strip().lower()
    return value or None


class SearchSettings(BaseModel):
    """Knobs that change how the engine runs, never what plan it finds."""

    model_config = ConfigDict(frozen=True)

    trace: bool = Field(default=False, description="Print every OR/AND expansion to the console.")
    path_index: Literal["linear", "hashed"] = Field(
        default="linear",
        description="Cycle check strategy. 'hashed' falls back to a scan for unhashable states.",
    )

    @classmethod
    def from_env(cls) -> "SearchSettings":
        overrides = {
            field: value
            for field, value in (
                ("trace", _env("AND_OR_TRACE")),
                ("path_index", _env("AND_OR_PATH_INDEX")),
            )
            if value is not None
        }
        return cls(**overrides)
