from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from typing import Optional

from arbiter.rank import badge_for
from arbiter.score import EvaluationResult


SCHEMA = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS load_log (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  filename TEXT NOT NULL,
  source TEXT,
  status_code INTEGER,
  error TEXT,
  loaded_at TEXT DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS sample_results (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  filename TEXT NOT NULL UNIQUE,
  label TEXT,
  title TEXT,
  source TEXT,
  total INTEGER,
  markup INTEGER,
  style INTEGER,
  script INTEGER,
  badge TEXT,
  feedback_json TEXT,
  doc_length INTEGER,
  evaluated_at TEXT DEFAULT (datetime('now'))
);
"""

RESULT_COLUMNS = (
    "filename",
    "label",
    "title",
    "source",
    "total",
    "markup",
    "style",
    "script",
    "badge",
    "feedback_json",
    "doc_length",
    "evaluated_at",
)


class Store:
    def __init__(self, db_path: str = "src/data/arena.sqlite"):
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(db_path)
        self.conn.executescript(SCHEMA)
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    # -------------------------
    # Logging
    # -------------------------
    def log_load(
        self,
        filename: str,
        source: Optional[str],
        status_code: Optional[int],
        error: Optional[str],
    ) -> None:
        self.conn.execute(
            "INSERT INTO load_log(filename, source, status_code, error) VALUES (?,?,?,?)",
            (filename, source, status_code, error),
        )
        self.conn.commit()

    def load_errors(self, limit: int = 10) -> list[tuple[str, int]]:
        return self.conn.execute(
            """
            SELECT error, COUNT(*) cnt
            FROM load_log
            WHERE error IS NOT NULL AND error != ''
            GROUP BY error
            ORDER BY cnt DESC
            LIMIT ?
            """,
            (limit,),
        ).fetchall()

    # -------------------------
    # Results
    # -------------------------
    def upsert_result(
        self,
        *,
        filename: str,
        label: str,
        title: Optional[str],
        source: Optional[str],
        result: EvaluationResult,
        doc_length: int,
    ) -> None:
        feedback = [f.to_dict() for f in result.feedback]
        self.conn.execute(
            """
            INSERT INTO sample_results(
              filename, label, title, source, total, markup, style, script,
              badge, feedback_json, doc_length
            )
            VALUES(?,?,?,?,?,?,?,?,?,?,?)
            ON CONFLICT(filename) DO UPDATE SET
              label=excluded.label,
              title=excluded.title,
              source=excluded.source,
              total=excluded.total,
              markup=excluded.markup,
              style=excluded.style,
              script=excluded.script,
              badge=excluded.badge,
              feedback_json=excluded.feedback_json,
              doc_length=excluded.doc_length,
              evaluated_at=datetime('now')
            """,
            (
                filename,
                label,
                title,
                source,
                int(result.total),
                int(result.breakdown.markup),
                int(result.breakdown.style),
                int(result.breakdown.script),
                badge_for(result.total),
                json.dumps(feedback, ensure_ascii=False),
                int(doc_length),
            ),
        )
        self.conn.commit()

    def get_results(self) -> list[dict]:
        rows = self.conn.execute(
            f"SELECT {', '.join(RESULT_COLUMNS)} FROM sample_results ORDER BY total DESC, filename ASC"
        ).fetchall()
        return [_row_to_dict(r) for r in rows]

    def get_result(self, filename: str) -> Optional[dict]:
        row = self.conn.execute(
            f"SELECT {', '.join(RESULT_COLUMNS)} FROM sample_results WHERE filename = ?",
            (filename,),
        ).fetchone()
        return _row_to_dict(row) if row else None


def _row_to_dict(row: tuple) -> dict:
    d = dict(zip(RESULT_COLUMNS, row))
    d["feedback"] = json.loads(d.pop("feedback_json") or "[]")
    return d
