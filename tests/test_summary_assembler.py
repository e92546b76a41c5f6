"""Tests for summary assembly."""

import dataclasses

import pytest

from gh_analyzer.domain.entities import RepoInfo, RepoStats
from gh_analyzer.services.summary_assembler import assemble_summary

INFO = RepoInfo(
    name="x",
    html_url="https://github.com/octo/x",
    stargazers_count=1,
    forks_count=0,
    created_at="2020-01-01T00:00:00Z",
    updated_at="2020-01-02T00:00:00Z",
    default_branch="main",
)


def test_inputs_are_copied():
    languages = {"Go": 100}
    content = {"README.md": "hi"}
    summary = assemble_summary(INFO, RepoStats(), languages, content)

    languages["Rust"] = 5
    content.clear()

    assert summary.languages == {"Go": 100}
    assert summary.content == {"README.md": "hi"}


def test_summary_is_frozen():
    summary = assemble_summary(INFO, RepoStats(), {}, {})
    with pytest.raises(dataclasses.FrozenInstanceError):
        summary.stats = RepoStats(size=1)


def test_to_dict_without_license():
    data = assemble_summary(INFO, RepoStats(), {}, {}).to_dict()
    assert data["repo"]["license"] is None
    assert data["repo"]["description"] is None
    assert data["stats"] == {
        "open_issues_count": 0,
        "watchers_count": 0,
        "network_count": 0,
        "size": 0,
    }


def test_maps_reject_mutation():
    summary = assemble_summary(INFO, RepoStats(), {"Go": 1}, {"README.md": "hi"})
    with pytest.raises(TypeError):
        summary.languages["Rust"] = 2
    with pytest.raises(TypeError):
        del summary.content["README.md"]
    assert summary.to_dict()["content"] == {"README.md": "hi"}
