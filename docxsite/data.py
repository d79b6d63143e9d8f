"""The small data sets the site ships with."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Information:
    """A person's name with a short description."""

    name: str
    description: str


@dataclass(frozen=True)
class ContentModel:
    """A titled paragraph of document content."""

    title: str
    paragraph: str


_ALL_DATA = (
    Information(name="Steve", description="Agressively single"),
    Information(name="Doris", description="Married"),
)

_DOC_SUBJECTS = (
    ContentModel(title="Steve", paragraph="Agressively single"),
    ContentModel(title="Doris", paragraph="Married"),
)


def all_data() -> list[Information]:
    """Return every information record, in order."""
    return list(_ALL_DATA)


def doc_subjects() -> list[ContentModel]:
    """Return every document subject, in order."""
    return list(_DOC_SUBJECTS)