#!/usr/bin/env python3
"""
Generate the GitHub stats card and the top languages card
by querying the GitHub GraphQL API for one account.

Output files (in CARDS_OUTPUT_DIR, default ./cards):
  github-stats.svg
  top-langs.svg

Environment variables:
  GITHUB_TOKEN: Token used as the GraphQL bearer credential (required)
  GITHUB_USERNAME: GitHub login to summarize (default: agneja00)
  CARDS_OUTPUT_DIR: Directory the cards are written to
  INCLUDE_ARCHIVED: Count archived repositories (default: false)
  INCLUDE_FORKS: Count forked repositories (default: false)
"""

from card_generator.controller import main

if __name__ == "__main__":
    main()
