import json
from datetime import datetime, timedelta, timezone

import pytest

from clover.actions import ActionKind, ActionRecord, ActionRequest, ActionStatus
from clover.storage import ActionJournal


def record(kind=ActionKind.JOIN, class_id="c1", status=ActionStatus.SUCCEEDED, when=None):
    return ActionRecord(
        request=ActionRequest(class_id=class_id, user_id="u1", kind=kind),
        status=status,
        message="done",
        timestamp=when or datetime.now(timezone.utc),
    )


@pytest.mark.asyncio
async def test_append_writes_jsonl(tmp_path):
    journal = ActionJournal(base_path=tmp_path)
    entry = record(when=datetime(2024, 1, 30, 10, 0, tzinfo=timezone.utc))

    await journal.append(entry)

    path = tmp_path / "2024-01-30.jsonl"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    data = json.loads(lines[0])
    assert data["kind"] == "join"
    assert data["status"] == "succeeded"
    assert data["class_id"] == "c1"


@pytest.mark.asyncio
async def test_get_recent_newest_first_and_filters(tmp_path):
    journal = ActionJournal(base_path=tmp_path)

    await journal.append(record(ActionKind.JOIN, class_id="c1"))
    await journal.append(record(ActionKind.LEAVE, class_id="c2", status=ActionStatus.FAILED))
    await journal.append(record(ActionKind.DELETE, class_id="c1"))

    entries = await journal.get_recent()
    assert [e["kind"] for e in entries] == ["delete", "leave", "join"]

    only_c1 = await journal.get_recent(class_id="c1")
    assert [e["kind"] for e in only_c1] == ["delete", "join"]

    failed = await journal.get_recent(status="failed")
    assert [e["class_id"] for e in failed] == ["c2"]

    limited = await journal.get_recent(limit=1)
    assert len(limited) == 1


@pytest.mark.asyncio
async def test_old_files_outside_window_are_skipped(tmp_path):
    journal = ActionJournal(base_path=tmp_path)
    old = datetime.now(timezone.utc) - timedelta(days=30)

    await journal.append(record(when=old))
    await journal.append(record())

    assert len(await journal.get_recent(days=7)) == 1
    assert len(await journal.get_recent(days=None)) == 2


@pytest.mark.asyncio
async def test_stats_and_corrupt_lines(tmp_path):
    journal = ActionJournal(base_path=tmp_path)
    await journal.append(record())
    await journal.append(record(status=ActionStatus.FAULTED))

    today = next(tmp_path.glob("*.jsonl"))
    with open(today, "a", encoding="utf-8") as f:
        f.write("not json\n\n")

    stats = await journal.get_stats()

    assert stats["total"] == 2
    assert stats["by_status"] == {"succeeded": 1, "faulted": 1}
    assert stats["success_rate"] == 0.5


def test_parse_timestamp():
    entry = record(when=datetime(2024, 1, 30, 10, 0, tzinfo=timezone.utc)).to_dict()

    assert ActionJournal.parse_timestamp(entry) == datetime(2024, 1, 30, 10, 0, tzinfo=timezone.utc)
    assert ActionJournal.parse_timestamp({}) is None


@pytest.mark.asyncio
async def test_window_uses_utc_day(tmp_path):
    journal = ActionJournal(base_path=tmp_path)
    edge = datetime.now(timezone.utc) - timedelta(days=7)

    await journal.append(record(when=edge))

    assert len(await journal.get_recent(days=7)) == 1
    assert len(await journal.get_recent(days=6)) == 0
