# SPDX-License-Identifier: MIT

from trackmytime.model.chart import ChartWindow
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.repository.tag import TAG_REPO


def complete_tag(incomplete: str) -> list[str]:
    """Return list of available tags for shell completion."""

    all_tags = TAG_REPO.get_all_tags()
    return [tag["name"] for tag in all_tags if tag["name"].startswith(incomplete)]


def complete_project(incomplete: str) -> list[str]:
    """Return list of available projects for shell completion."""

    all_projects = PROJECT_REPO.get_all_projects()
    return [
        project["name"]
        for project in all_projects
        if project["name"].startswith(incomplete)
    ]


def complete_window(incomplete: str) -> list[str]:
    return [window.value for window in ChartWindow if window.value.startswith(incomplete)]
