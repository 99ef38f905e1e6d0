#------------------------------------------------------------
#                      stats_service.py
#          Aggregates the GraphQL account response into
#                    an immutable snapshot.

from types import MappingProxyType
from typing import Dict, List
from ..models import AccountSnapshot, DataShapeError, RepositoryFilter

MISSING_USER_MESSAGE = "Response is missing the user object"
MISSING_FIELD_TEMPLATE = "Response is missing required field {field!r}"
MALFORMED_RESPONSE_TEMPLATE = "Response has an unexpected shape: {error}"

# This function does decide whether a repository node is counted.
# Absent isArchived/isFork flags count as False.
def include_repository(node: dict, repository_filter: RepositoryFilter) -> bool:
    if node.get("isArchived") and not repository_filter.include_archived:
        return False
    if node.get("isFork") and not repository_filter.include_forks:
        return False
    return True

# This function does sum language byte sizes across repositories.
# Keys keep first-appearance order so later ranking ties stay stable.
def aggregate_language_bytes(nodes: List[dict]) -> Dict[str, int]:
    totals: Dict[str, int] = {}
    for node in nodes:
        for edge in (node.get("languages") or {}).get("edges") or []:
            if not edge:
                continue
            name = edge["node"]["name"]
            totals[name] = totals.get(name, 0) + int(edge["size"])
    return totals

# This function does build the account snapshot from the GraphQL data object.
# It filters repositories, sums stars and languages, and copies counters.
def build_snapshot(data: dict, repository_filter: RepositoryFilter, fallback_login: str = "") -> AccountSnapshot:
    user = (data or {}).get("user")
    if not user:
        raise DataShapeError(MISSING_USER_MESSAGE)

    try:
        nodes = user["repositories"]["nodes"] or []
        included = [node for node in nodes if node and include_repository(node, repository_filter)]
        star_total = sum(int(node["stargazerCount"]) for node in included)
        language_bytes = aggregate_language_bytes(included)

        contributions = user["contributionsCollection"]
        commit_count = int(contributions["totalCommitContributions"])
        pull_request_count = int(contributions["totalPullRequestContributions"])
        issue_count = int(contributions["totalIssueContributions"])
        calendar_total = int(contributions["contributionCalendar"]["totalContributions"])
    except KeyError as exc:
        raise DataShapeError(MISSING_FIELD_TEMPLATE.format(field=exc.args[0])) from exc
    except (AttributeError, TypeError, ValueError) as exc:
        raise DataShapeError(MALFORMED_RESPONSE_TEMPLATE.format(error=exc)) from exc

    login = user.get("login") or fallback_login
    display_name = (user.get("name") or "").strip() or login

    return AccountSnapshot(
        login=login,
        display_name=display_name,
        star_total=star_total,
        commit_count=commit_count,
        pull_request_count=pull_request_count,
        issue_count=issue_count,
        contribution_calendar_total=calendar_total,
        language_bytes=MappingProxyType(language_bytes),
        repository_count=len(included),
    )
