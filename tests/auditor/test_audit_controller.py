# tests/auditor/test_audit_controller.py
import json
import logging
from unittest.mock import MagicMock

import pytest

from seo_auditor.config import AuditConfig
from seo_auditor.controllers.audit_controller import AuditController
from seo_auditor.controllers.report_controller import ReportSink
from seo_auditor.model import Page

LONG_TITLE = "A title that keeps going and going well past any sensible length for a search result"


@pytest.fixture
def captured():
    """A handler that keeps every report it receives."""
    reports = []
    handler = MagicMock(side_effect=reports.append)
    handler.reports = reports
    return handler


def test_ignored_pages_never_reach_the_report(captured):
    pages = [Page(url="/a", title=LONG_TITLE), Page(url="/404.html", title=LONG_TITLE)]

    AuditController(AuditConfig(output=captured)).run_batch(pages)

    captured.assert_called_once()
    assert list(captured.reports[0]) == ["/a"]


def test_ignored_page_is_logged(caplog):
    caplog.set_level(logging.INFO)
    sink = MagicMock(spec=ReportSink)
    AuditController(AuditConfig(), sink=sink).run_batch([Page(url="/404.html", title=LONG_TITLE)])
    assert "Skipping /404.html" in caplog.text


def test_clean_batch_does_not_call_sink(caplog):
    caplog.set_level(logging.INFO)
    sink = MagicMock(spec=ReportSink)

    report = AuditController(AuditConfig(), sink=sink).run_batch([Page(url="/a"), Page(url="/b", title="Hi")])

    sink.emit.assert_not_called()
    assert report.is_empty()
    assert "No warnings to report" in caplog.text


def test_sink_called_once_per_batch():
    sink = MagicMock(spec=ReportSink)
    pages = [Page(url="/a", title=LONG_TITLE), Page(url="/b", title=LONG_TITLE)]

    report = AuditController(AuditConfig(), sink=sink).run_batch(pages)

    sink.emit.assert_called_once_with(report)
    assert len(report) == 2


def test_batches_do_not_share_warnings(captured):
    controller = AuditController(AuditConfig(output=captured))

    first = controller.run_batch([Page(url="/a", title=LONG_TITLE)])
    second = controller.run_batch([Page(url="/b", title=LONG_TITLE)])

    assert list(captured.reports[1]) == ["/b"]
    assert "/a" in first
    assert "/a" not in second


def test_file_report_contains_batch_warnings(tmp_path, soup):
    path = tmp_path / "seo.json"
    page = Page(url="/post", title="The Quick Brown Fox", document=soup('<h1>Fox</h1><img src="f.png">'))

    AuditController(AuditConfig(output=str(path))).run_batch([page, Page(url="/clean")])

    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == ["/post"]
    assert len(data["/post"]) == 2
    assert any("alt attribute" in w for w in data["/post"])
    assert any("title attribute" in w for w in data["/post"])


def test_sink_failure_aborts_batch(tmp_path):
    config = AuditConfig(output=str(tmp_path / "missing" / "seo.json"))
    with pytest.raises(OSError):
        AuditController(config).run_batch([Page(url="/a", title=LONG_TITLE)])


def test_no_output_and_empty_report_prints_nothing(capsys):
    AuditController(AuditConfig()).run_batch([Page(url="/a")])
    assert capsys.readouterr().out == ""


def test_progress_callback_sees_every_page():
    progress = MagicMock()
    pages = [Page(url="/a"), Page(url="/404.html"), Page(url="/c")]

    AuditController(AuditConfig(), sink=MagicMock(spec=ReportSink)).run_batch(pages, progress_callback=progress)

    assert [c.args for c in progress.call_args_list] == [(1, 3), (2, 3), (3, 3)]


def test_select_pages_by_extension():
    pages = [
        Page(url="/a", src_ext=".md"),
        Page(url="/b", src_ext=".njk"),
        Page(url="/c", src_ext=".mdx"),
        Page(url="/d"),
    ]
    selected = AuditController(AuditConfig()).select_pages(pages)
    assert [p.url for p in selected] == ["/a", "/c", "/d"]


def test_controller_report_is_reset_between_batches(captured):
    controller = AuditController(AuditConfig(output=captured))
    live = controller.report

    first = controller.run_batch([Page(url="/a", title=LONG_TITLE)])
    controller.run_batch([Page(url="/b", title=LONG_TITLE)])

    assert controller.report is live
    assert list(live) == ["/b"]
    assert first is not live
    assert list(first) == ["/a"]

