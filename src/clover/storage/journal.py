"""Journal of confirmed class actions."""

from pathlib import Path
from datetime import date, datetime, timedelta, timezone
from typing import Optional
import json
import aiofiles

from ..actions.orchestrator import ActionRecord
from ..config import config


class ActionJournal:
    """
    Keeps confirmed actions in JSONL format, one file per day.

    Structure:
    journal/2024-01-30.jsonl
    """

    def __init__(self, base_path: Optional[Path] = None):
        self.base_path = base_path or config.paths.journal

        # Ensure directory exists
        self.base_path.mkdir(parents=True, exist_ok=True)

    async def append(self, record: ActionRecord):
        """Append one action record to today's file."""
        path = self.base_path / f"{record.timestamp.date().isoformat()}.jsonl"
        async with aiofiles.open(path, "a", encoding="utf-8") as f:
            await f.write(json.dumps(record.to_dict(), ensure_ascii=False) + "\n")

    def _get_files(self, days: Optional[int]) -> list[Path]:
        """Get journal files, newest first."""
        # Files are named by UTC day, see append()
        today = datetime.now(timezone.utc).date()
        start_date = today - timedelta(days=days) if days is not None else None

        files = []
        for file_path in sorted(self.base_path.glob("*.jsonl"), reverse=True):
            try:
                file_date = date.fromisoformat(file_path.stem)
            except ValueError:
                continue
            if start_date is None or file_date >= start_date:
                files.append(file_path)

        return files

    async def get_recent(
        self,
        limit: int = 50,
        class_id: Optional[str] = None,
        status: Optional[str] = None,
        days: Optional[int] = 7,
    ) -> list[dict]:
        """
        Get recent journal entries, newest first.

        Args:
            limit: Maximum number of entries to return
            class_id: Only entries for this class
            status: Only entries with this status ("succeeded", "failed", ...)
            days: How many days back to look, None for everything

        Returns:
            List of journal entries
        """
        entries = []

        for file_path in self._get_files(days):
            file_entries = []
            try:
                async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                    async for line in f:
                        if not line.strip():
                            continue
                        try:
                            entry = json.loads(line)
                        except json.JSONDecodeError:
                            continue

                        if class_id and entry.get("class_id") != class_id:
                            continue
                        if status and entry.get("status") != status:
                            continue

                        file_entries.append(entry)
            except FileNotFoundError:
                continue

            # Lines are appended in order, so reverse for newest first
            entries.extend(reversed(file_entries))
            if len(entries) >= limit:
                break

        return entries[:limit]

    async def get_stats(self, days: Optional[int] = 7) -> dict:
        """Count journal entries by status."""
        entries = await self.get_recent(limit=10_000, days=days)
        counts: dict[str, int] = {}
        for entry in entries:
            key = entry.get("status", "unknown")
            counts[key] = counts.get(key, 0) + 1

        total = len(entries)
        return {
            "total": total,
            "by_status": counts,
            "success_rate": counts.get("succeeded", 0) / total if total > 0 else 0,
        }

    @staticmethod
    def parse_timestamp(entry: dict) -> Optional[datetime]:
        raw = entry.get("timestamp")
        return datetime.fromisoformat(raw) if raw else None
