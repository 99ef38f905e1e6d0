import copy

import pytest

from card_generator.config import default_palette
from card_generator.models import CardConfig, RepositoryFilter

SAMPLE_DATA = {
    "user": {
        "login": "octocat",
        "name": "Octo Cat",
        "repositories": {
            "nodes": [
                {
                    "isArchived": False,
                    "isFork": False,
                    "stargazerCount": 30,
                    "languages": {
                        "edges": [
                            {"size": 200, "node": {"name": "TypeScript"}},
                            {"size": 50, "node": {"name": "CSS"}},
                        ]
                    },
                },
                {
                    "isArchived": False,
                    "isFork": False,
                    "stargazerCount": 12,
                    "languages": {
                        "edges": [
                            {"size": 100, "node": {"name": "TypeScript"}},
                            {"size": 100, "node": {"name": "JavaScript"}},
                        ]
                    },
                },
                {
                    "isArchived": True,
                    "isFork": False,
                    "stargazerCount": 5,
                    "languages": {"edges": [{"size": 700, "node": {"name": "Shell"}}]},
                },
                {
                    "isArchived": False,
                    "isFork": True,
                    "stargazerCount": 7,
                    "languages": {"edges": [{"size": 900, "node": {"name": "Go"}}]},
                },
            ]
        },
        "contributionsCollection": {
            "totalCommitContributions": 10,
            "totalPullRequestContributions": 3,
            "totalIssueContributions": 1,
            "contributionCalendar": {"totalContributions": 500},
        },
    }
}

@pytest.fixture
def sample_data():
    return copy.deepcopy(SAMPLE_DATA)

@pytest.fixture
def make_config(tmp_path):
    def _make(token="test-token", **filters):
        return CardConfig(
            github_username="octocat",
            github_token=token,
            output_dir=str(tmp_path / "cards"),
            repository_filter=RepositoryFilter(**filters),
            palette=default_palette(),
        )
    return _make
