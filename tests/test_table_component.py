from __future__ import annotations

from table_presenter.components.table import StreamlitTableTarget, header_label, snapshot_dataframe
from table_presenter.config import SORT_ASC, SORT_DESC
from table_presenter.models import ColumnSpec, HeaderCell
from table_presenter.services.view_state import TableView


def test_target_keeps_latest_snapshot():
    target = StreamlitTableTarget()
    view = TableView(target, columns=[ColumnSpec("name")], data=[{"name": "b"}, {"name": "a"}])

    assert target.render_count == 1
    assert target.snapshot is view.snapshot

    view.set_sort("name")
    assert target.render_count == 2
    assert [record["name"] for record in target.snapshot.rows] == ["b", "a"]


def test_header_label_shows_sort_indicator():
    assert header_label(HeaderCell("a", "Name", True, SORT_ASC)) == "Name ▲"
    assert header_label(HeaderCell("a", "Name", True, SORT_DESC)) == "Name ▼"
    assert header_label(HeaderCell("a", "Name", False)) == "Name"


def test_snapshot_dataframe_uses_labels_and_renderers():
    columns = [
        ColumnSpec("name", "Name"),
        ColumnSpec("score", "Score", cell_renderer=lambda record: f"{record['score']}%"),
    ]
    target = StreamlitTableTarget()
    TableView(target, columns=columns, data=[{"name": "Ada", "score": 90}, {"name": "Bo", "score": 75}])

    dataframe = snapshot_dataframe(target.snapshot)

    assert list(dataframe.columns) == ["Name", "Score"]
    assert dataframe.to_dict(orient="records") == [
        {"Name": "Ada", "Score": "90%"},
        {"Name": "Bo", "Score": "75%"},
    ]
