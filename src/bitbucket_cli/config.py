from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

BITBUCKET_HOST = "bitbucket.org"


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    bitbucket_host: str = Field(default=BITBUCKET_HOST)
    bitbucket_scheme: str = Field(default="https")
    git_config_path: Path = Field(default=Path(".git") / "config")

    @property
    def base_url(self) -> str:
        return f"{self.bitbucket_scheme}://{self.bitbucket_host}"
