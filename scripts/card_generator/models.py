#------------------------------------------------------------
#                          models.py
#     Defines dataclasses and errors used by the card
#                     generation pipeline.

from dataclasses import dataclass, field
from typing import Mapping

class CardGenerationError(Exception):
    """Base class for failures that abort a card generation run."""

class ConfigurationError(CardGenerationError):
    """Required configuration, such as the API token, is missing."""

class TransportError(CardGenerationError):
    """The GraphQL request failed or returned an unusable HTTP response."""

class DataShapeError(CardGenerationError):
    """The GraphQL response lacks fields the aggregator needs."""

@dataclass(frozen=True)
class RepositoryFilter:
    include_archived: bool = False
    include_forks: bool = False

@dataclass(frozen=True)
class LanguagePalette:
    colors: Mapping[str, str] = field(default_factory=dict)
    default_color: str = "#888888"

    # This function does resolve the display color for a language.
    # It falls back to the default color for unknown names.
    def color_for(self, name: str) -> str:
        return self.colors.get(name, self.default_color)

@dataclass
class CardConfig:
    github_username: str
    github_token: str
    output_dir: str
    repository_filter: RepositoryFilter = field(default_factory=RepositoryFilter)
    palette: LanguagePalette = field(default_factory=LanguagePalette)

@dataclass(frozen=True)
class AccountSnapshot:
    login: str
    display_name: str
    star_total: int
    commit_count: int
    pull_request_count: int
    issue_count: int
    contribution_calendar_total: int
    language_bytes: Mapping[str, int]
    repository_count: int = 0

@dataclass(frozen=True)
class LanguageShare:
    name: str
    size: int
    percent_hundredths: int
    color: str

    @property
    def percent_text(self) -> str:
        return f"{self.percent_hundredths // 100}.{self.percent_hundredths % 100:02d}"

