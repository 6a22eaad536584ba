# ghquick Configuration Schema
# Pydantic models for YAML configuration validation

from string import Formatter

from pydantic import BaseModel, Field, field_validator

URL_FIELDS = frozenset({"account", "repo"})


class IdentityConfig(BaseModel):
    """Account and committer identity."""

    account: str = Field(default="", description="GitHub account name used in the remote URL")
    user_name: str = Field(default="", description="Committer name (defaults to account)")

    def get_user_name(self) -> str:
        """Committer name, falling back to the account."""
        return self.user_name or self.account


class RemoteConfig(BaseModel):
    """Push target settings."""

    name: str = Field(default="origin", description="Remote name for push")
    branch: str = Field(default="main", description="Branch name for push")
    url_template: str = Field(
        default="https://github.com/{account}/{repo}.git",
        description="Remote URL template, with {account} and {repo} placeholders",
    )

    @field_validator("url_template")
    @classmethod
    def check_placeholders(cls, v: str) -> str:
        """Require both placeholders and allow no others."""
        try:
            fields = {name for _, name, _, _ in Formatter().parse(v) if name is not None}
        except ValueError as e:
            raise ValueError(f"url_template is not a valid template: {e}") from e
        unknown = sorted(fields - URL_FIELDS)
        if unknown:
            raise ValueError(f"url_template has unknown placeholders: {', '.join(unknown)}")
        for placeholder in ("account", "repo"):
            if placeholder not in fields:
                raise ValueError(f"url_template must contain {{{placeholder}}}")
        return v


class GitConfig(BaseModel):
    """Git executable settings."""

    executable: str = Field(default="git", description="Git executable name or path")
    timeout: float | None = Field(default=None, gt=0, description="Per-command timeout in seconds")


class OutputConfig(BaseModel):
    """Output settings."""

    debug: bool = Field(default=False, description="Show debug output")
    colored: bool = Field(default=True, description="Enable colored output")


class GhQuickConfig(BaseModel):
    """Root configuration model for ghquick."""

    identity: IdentityConfig = Field(default_factory=IdentityConfig, description="Identity settings")
    remote: RemoteConfig = Field(default_factory=RemoteConfig, description="Remote settings")
    git: GitConfig = Field(default_factory=GitConfig, description="Git settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")
