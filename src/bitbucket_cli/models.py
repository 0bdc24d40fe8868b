from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bitbucket_cli.errors import ConfigFormatError

GIT_SUFFIX = ".git"


class RemoteEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    fetch: str

    def __str__(self):
        return f"<Remote: {self.name} {self.url}>"


class MalformedRemote(BaseModel):
    """A `[remote]` section that lacks keys a usable remote needs."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str | None = None
    missing: list[str]

    @property
    def error(self) -> ConfigFormatError:
        return ConfigFormatError(self.name, self.missing)


class RemoteCollection(BaseModel):
    model_config = ConfigDict(frozen=True)

    remotes: list[RemoteEntry] = Field(default_factory=list)
    malformed: list[MalformedRemote] = Field(default_factory=list)


class RepositoryIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    workspace: str = Field(min_length=1)
    name: str = Field(min_length=1)

    @field_validator("name", mode="before")
    @classmethod
    def strip_git_suffix(cls, value: Any) -> Any:
        if isinstance(value, str) and value.endswith(GIT_SUFFIX):
            return value[: -len(GIT_SUFFIX)]
        return value

    @property
    def slug(self) -> str:
        return f"{self.workspace}/{self.name}"

    def __str__(self):
        return f"<Repo: {self.slug}>"


class BrowseTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    identity: RepositoryIdentity
    branch: str | None = None
    commit: str | None = None


class RepoOverride(BaseModel):
    """Repository named explicitly as WORKSPACE/REPO."""

    model_config = ConfigDict(frozen=True)

    spec: str


class DiscoveredRepo(BaseModel):
    """Repository found from the Git config of a working directory."""

    model_config = ConfigDict(frozen=True)

    directory: Path


RepoSource = RepoOverride | DiscoveredRepo
