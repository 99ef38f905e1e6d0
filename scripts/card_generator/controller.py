#------------------------------------------------------------
#                        controller.py
#          Coordinates fetching, aggregation, rendering,
#                   and writing of stat cards.

import os
import sys
from typing import List, Optional
from .config import (
    LANGUAGES_CARD_FILENAME,
    NO_GITHUB_TOKEN_MESSAGE,
    STATS_CARD_FILENAME,
    load_config,
)
from .models import CardConfig, CardGenerationError, ConfigurationError
from .services.github_service import GitHubService
from .services.output_service import ensure_output_dir, save_cards
from .services.stats_service import build_snapshot
from .views.svg_view import render_languages_card, render_stats_card

ERROR_MESSAGE_TEMPLATE = "ERROR: {error}"

# This function does execute the full card generation workflow end-to-end.
# Both cards are rendered, then written together so a failed write keeps the old pair.
def run_generation(config: CardConfig, github_service: Optional[GitHubService] = None) -> List[str]:
    if not config.github_token:
        raise ConfigurationError(NO_GITHUB_TOKEN_MESSAGE)

    ensure_output_dir(config.output_dir)

    github_service = github_service or GitHubService(config)
    data = github_service.fetch_account(config.github_username)

    snapshot = build_snapshot(data, config.repository_filter, fallback_login=config.github_username)
    print(f"Included repositories: {snapshot.repository_count}")
    print(f"Languages found: {len(snapshot.language_bytes)}")

    rendered = [
        (os.path.join(config.output_dir, STATS_CARD_FILENAME), render_stats_card(snapshot)),
        (os.path.join(config.output_dir, LANGUAGES_CARD_FILENAME), render_languages_card(snapshot.language_bytes, config.palette)),
    ]

    written = save_cards(rendered)
    for path in written:
        print(f"Wrote {path}")
    return written

# This function does run the generator with environment configuration.
# It reports failures on stderr and exits non-zero.
def main() -> None:
    config = load_config()
    filters = config.repository_filter
    print(
        f"Generating stat cards for {config.github_username} "
        f"(archived: {'included' if filters.include_archived else 'excluded'}, "
        f"forks: {'included' if filters.include_forks else 'excluded'})"
    )
    try:
        run_generation(config)
    except CardGenerationError as exc:
        print(ERROR_MESSAGE_TEMPLATE.format(error=exc), file=sys.stderr)
        sys.exit(1)
    print("Stat cards generated successfully.")
