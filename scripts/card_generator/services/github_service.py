#------------------------------------------------------------
#                      github_service.py
#             Handles the GitHub GraphQL request and
#                    response unwrapping.

from typing import Dict, List
import requests
from ..config import (
    GITHUB_GRAPHQL_URL,
    GITHUB_LANGUAGES_PER_REPO,
    GITHUB_REPOS_PER_PAGE,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
    NO_GITHUB_TOKEN_MESSAGE,
)
from ..models import CardConfig, ConfigurationError, DataShapeError, TransportError

ACCOUNT_QUERY = """
query($login: String!) {
  user(login: $login) {
    login
    name
    repositories(ownerAffiliations: OWNER, first: %(repos_per_page)d) {
      nodes {
        isArchived
        isFork
        stargazerCount
        languages(first: %(languages_per_repo)d) {
          edges {
            size
            node { name }
          }
        }
      }
    }
    contributionsCollection {
      totalCommitContributions
      totalPullRequestContributions
      totalIssueContributions
      contributionCalendar {
        totalContributions
      }
    }
  }
}
""" % {
    "repos_per_page": GITHUB_REPOS_PER_PAGE,
    "languages_per_repo": GITHUB_LANGUAGES_PER_REPO,
}

REQUEST_MESSAGE = "Querying GitHub GraphQL API for {login} …"
REQUEST_FAILED_TEMPLATE = "GitHub GraphQL request failed: {error}"
INVALID_JSON_TEMPLATE = "GitHub GraphQL response is not valid JSON: {error}"
MISSING_USER_TEMPLATE = "GitHub GraphQL response has no user data for {login!r}"
GRAPHQL_ERRORS_TEMPLATE = "{message} ({errors})"

class GitHubService:

    def __init__(self, config: CardConfig):
        self.config = config

    # This function does build request headers for the GraphQL call.
    # It raises ConfigurationError when no token is configured.
    def headers(self) -> Dict[str, str]:
        if not self.config.github_token:
            raise ConfigurationError(NO_GITHUB_TOKEN_MESSAGE)
        return {
            "Authorization": f"Bearer {self.config.github_token}",
            "Content-Type": "application/json",
        }

    # This function does run the account query for one login.
    # It returns the decoded "data" object shaped as {"user": {...}}.
    def fetch_account(self, login: str) -> dict:
        headers = self.headers()
        payload = {"query": ACCOUNT_QUERY, "variables": {"login": login}}

        print(REQUEST_MESSAGE.format(login=login))
        try:
            response = requests.post(
                GITHUB_GRAPHQL_URL,
                json=payload,
                headers=headers,
                timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(REQUEST_FAILED_TEMPLATE.format(error=exc)) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError(INVALID_JSON_TEMPLATE.format(error=exc)) from exc

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict) or not data.get("user"):
            message = MISSING_USER_TEMPLATE.format(login=login)
            errors = self._error_messages(body)
            if errors:
                message = GRAPHQL_ERRORS_TEMPLATE.format(message=message, errors="; ".join(errors))
            raise DataShapeError(message)

        return data

    # This function does collect GraphQL error messages from a response body.
    # It returns an empty list when the body carries no errors.
    @staticmethod
    def _error_messages(body) -> List[str]:
        if not isinstance(body, dict):
            return []
        errors = body.get("errors") or []
        return [str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors]
