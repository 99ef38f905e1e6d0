#------------------------------------------------------------
#                          config.py
#   Centralizes paths, card constants, and environment-driven
#                   configuration loading.

import os
from typing import Mapping, Optional
from .models import CardConfig, LanguagePalette, RepositoryFilter

# Environment variable names for configuration
ENV_GITHUB_USERNAME = "GITHUB_USERNAME"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_OUTPUT_DIR = "CARDS_OUTPUT_DIR"
ENV_INCLUDE_ARCHIVED = "INCLUDE_ARCHIVED"
ENV_INCLUDE_FORKS = "INCLUDE_FORKS"

# Default values for configuration parameters
DEFAULT_GITHUB_USERNAME = "agneja00"
DEFAULT_INCLUDE_ARCHIVED = False
DEFAULT_INCLUDE_FORKS = False
TRUTHY_ENV_VALUES = ("1", "true", "yes", "on")

# Constants for GitHub GraphQL interaction
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_REQUEST_TIMEOUT_SECONDS = 30
GITHUB_REPOS_PER_PAGE = 100
GITHUB_LANGUAGES_PER_REPO = 50

# Output file names for the generated cards.
STATS_CARD_FILENAME = "github-stats.svg"
LANGUAGES_CARD_FILENAME = "top-langs.svg"

# Language colors used by the stacked bar and legend.
LANGUAGE_COLORS = {
    "TypeScript": "#2b7489",
    "JavaScript": "#f1e05a",
    "HTML": "#e34c26",
    "SCSS": "#c6538c",
    "CSS": "#563d7c",
    "Dockerfile": "#384d54",
    "Shell": "#89e051",
}
DEFAULT_LANGUAGE_COLOR = "#888888"

# Messages shown when configuration is incomplete.
NO_GITHUB_TOKEN_MESSAGE = "GITHUB_TOKEN is not defined"

# Directory paths for the project and generated output.
SCRIPTS_DIR = os.path.dirname(os.path.dirname(__file__))
ROOT_DIR = os.path.dirname(SCRIPTS_DIR)
DEFAULT_OUTPUT_DIR = os.path.join(ROOT_DIR, "cards")

# This function does interpret an environment flag value.
# It treats common truthy spellings as True and everything else as False.
def parse_flag(value: Optional[str], default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUTHY_ENV_VALUES

def default_palette() -> LanguagePalette:
    return LanguagePalette(colors=dict(LANGUAGE_COLORS), default_color=DEFAULT_LANGUAGE_COLOR)

# This function does build the run configuration from environment values.
# It accepts any mapping so callers can pass fixture data instead of os.environ.
def load_config(environ: Optional[Mapping[str, str]] = None) -> CardConfig:
    env = os.environ if environ is None else environ

    output_dir = env.get(ENV_OUTPUT_DIR, "").strip() or DEFAULT_OUTPUT_DIR
    if not os.path.isabs(output_dir):
        output_dir = os.path.join(ROOT_DIR, output_dir)

    return CardConfig(
        github_username=env.get(ENV_GITHUB_USERNAME, "").strip() or DEFAULT_GITHUB_USERNAME,
        github_token=env.get(ENV_GITHUB_TOKEN, "").strip(),
        output_dir=output_dir,
        repository_filter=RepositoryFilter(
            include_archived=parse_flag(env.get(ENV_INCLUDE_ARCHIVED), DEFAULT_INCLUDE_ARCHIVED),
            include_forks=parse_flag(env.get(ENV_INCLUDE_FORKS), DEFAULT_INCLUDE_FORKS),
        ),
        palette=default_palette(),
    )
