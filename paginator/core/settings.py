from pathlib import Path
from typing import Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from paginator.core.metadata import Metadata

DEFAULT_METADATA_PATH = Path(__file__).resolve().parent.parent / "meta.yaml"


class MetaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAGINATOR_", extra="ignore")

    metadata: Optional[Metadata] = None

    default_page_size: int = Field(default=20, ge=1, description="Rows per page when none is given")
    max_page_size: Optional[int] = Field(
        default=None, ge=1, description="Largest page size a caller may request"
    )
    page_param: str = Field(default="page", description="Request parameter holding the page number")
    allow_empty_total: bool = Field(
        default=False, description="Accept a total of zero items when building metadata"
    )
    sql_dialect: Optional[str] = Field(
        default=None, description="sqlglot dialect used for raw SQL strings"
    )

    @classmethod
    def from_metadata(cls, metadata_path: Path = DEFAULT_METADATA_PATH) -> "MetaSettings":
        with open(metadata_path, encoding="utf-8") as f:
            metadata = Metadata(**(yaml.safe_load(f) or {}))
        # environment variables win over meta.yaml
        from_env = cls().model_fields_set
        overrides = {k: v for k, v in metadata.settings.items() if k not in from_env}
        return cls(metadata=metadata, **overrides)
