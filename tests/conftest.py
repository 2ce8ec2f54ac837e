from __future__ import annotations

from typing import List, Tuple

import pytest

from table_presenter.models import ColumnSpec, TableSnapshot


class RecordingTarget:
    """Render target that keeps every snapshot it receives."""

    def __init__(self) -> None:
        self.calls: List[Tuple[TableSnapshot, object]] = []

    def __call__(self, snapshot: TableSnapshot, view: object) -> None:
        self.calls.append((snapshot, view))

    @property
    def last(self) -> TableSnapshot:
        return self.calls[-1][0]


@pytest.fixture
def target() -> RecordingTarget:
    return RecordingTarget()


@pytest.fixture
def columns() -> List[ColumnSpec]:
    return [
        ColumnSpec("name", "Name"),
        ColumnSpec("team", "Team"),
        ColumnSpec("score", "Score"),
        ColumnSpec("email", "Email", ignore_filtering=True),
    ]


@pytest.fixture
def team_records() -> List[dict]:
    """25 records; exactly 12 belong to team alpha."""
    records = []
    for index in range(25):
        team = "alpha" if index % 2 == 0 and index < 24 else "beta"
        records.append(
            {
                "name": f"member {index:02d}",
                "team": team,
                "score": (index * 7) % 25,
                "email": f"member{index:02d}@alpha.example.com",
            }
        )
    return records
