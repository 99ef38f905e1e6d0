import os

import pytest

from card_generator import controller
from card_generator.models import ConfigurationError, DataShapeError
from card_generator.controller import run_generation
from card_generator.services import output_service

class FakeGitHubService:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.logins = []

    def fetch_account(self, login):
        self.logins.append(login)
        if self.error is not None:
            raise self.error
        return self.data

def test_run_generation_writes_both_cards(make_config, sample_data):
    config = make_config()
    service = FakeGitHubService(sample_data)

    written = run_generation(config, service)

    assert service.logins == ["octocat"]
    assert [os.path.basename(path) for path in written] == ["github-stats.svg", "top-langs.svg"]

    with open(written[0], encoding="utf-8") as file_handle:
        stats = file_handle.read()
    assert "Octo Cat's GitHub Stats" in stats
    assert "Total Stars Earned: 42" in stats
    assert "Contributed (last year): 500" in stats

    with open(written[1], encoding="utf-8") as file_handle:
        languages = file_handle.read()
    assert "TypeScript 66.67%" in languages
    assert "JavaScript 22.22%" in languages
    assert "CSS 11.11%" in languages
    assert "Shell" not in languages

def test_run_generation_honours_repository_filter(make_config, sample_data):
    config = make_config(include_archived=True, include_forks=True)
    written = run_generation(config, FakeGitHubService(sample_data))

    with open(written[0], encoding="utf-8") as file_handle:
        assert "Total Stars Earned: 54" in file_handle.read()
    with open(written[1], encoding="utf-8") as file_handle:
        languages = file_handle.read()
    assert "Go " in languages
    assert "Shell " in languages

def test_missing_token_fails_before_anything_else(make_config, sample_data):
    config = make_config(token="")
    service = FakeGitHubService(sample_data)

    with pytest.raises(ConfigurationError):
        run_generation(config, service)

    assert service.logins == []
    assert not os.path.exists(config.output_dir)

def test_bad_response_writes_no_cards(make_config):
    config = make_config()
    with pytest.raises(DataShapeError):
        run_generation(config, FakeGitHubService({"user": None}))
    assert os.listdir(config.output_dir) == []

def test_main_exits_non_zero_without_token(monkeypatch, capsys, tmp_path):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("CARDS_OUTPUT_DIR", str(tmp_path / "cards"))

    with pytest.raises(SystemExit) as excinfo:
        controller.main()

    assert excinfo.value.code == 1
    assert "ERROR: GITHUB_TOKEN is not defined" in capsys.readouterr().err

def test_main_generates_cards(monkeypatch, capsys, tmp_path, sample_data):
    output_dir = tmp_path / "cards"
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    monkeypatch.setenv("GITHUB_USERNAME", "octocat")
    monkeypatch.setenv("CARDS_OUTPUT_DIR", str(output_dir))
    monkeypatch.setattr(controller, "GitHubService", lambda config: FakeGitHubService(sample_data))

    controller.main()

    assert sorted(os.listdir(output_dir)) == ["github-stats.svg", "top-langs.svg"]
    assert "Stat cards generated successfully." in capsys.readouterr().out

def test_failed_write_keeps_previous_cards(monkeypatch, make_config, sample_data):
    config = make_config()
    os.makedirs(config.output_dir)
    for name in ("github-stats.svg", "top-langs.svg"):
        with open(os.path.join(config.output_dir, name), "w", encoding="utf-8") as file_handle:
            file_handle.write("old")

    real_save_card = output_service.save_card
    calls = []

    def flaky_save_card(path, content):
        calls.append(path)
        if len(calls) == 2:
            raise OSError("disk full")
        real_save_card(path, content)

    monkeypatch.setattr(output_service, "save_card", flaky_save_card)

    with pytest.raises(OSError, match="disk full"):
        run_generation(config, FakeGitHubService(sample_data))

    assert sorted(os.listdir(config.output_dir)) == ["github-stats.svg", "top-langs.svg"]
    for name in ("github-stats.svg", "top-langs.svg"):
        with open(os.path.join(config.output_dir, name), encoding="utf-8") as file_handle:
            assert file_handle.read() == "old"
