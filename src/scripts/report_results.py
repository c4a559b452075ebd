from __future__ import annotations

import sqlite3
from pathlib import Path

from arbiter.rank import BADGE_LABELS


def pick_db(root: Path) -> Path:
    candidates = [
        root / "src" / "data" / "arena.sqlite",
        root / "data" / "arena.sqlite",
    ]
    existing = [p for p in candidates if p.exists()]
    if not existing:
        raise FileNotFoundError("No arena.sqlite found in src/data or data")
    # pick the largest file (usually the real one)
    return sorted(existing, key=lambda p: p.stat().st_size, reverse=True)[0]


def table_exists(conn: sqlite3.Connection, name: str) -> bool:
    return (
        conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type='table' AND name=? LIMIT 1",
            (name,),
        ).fetchone()
        is not None
    )


def main() -> None:
    root = Path(__file__).resolve().parents[2]
    db_path = pick_db(root)

    print("=" * 60)
    print("CODE BATTLE REPORT")
    print("=" * 60)
    print(f"Using DB:  {db_path}  ({db_path.stat().st_size} bytes)")
    print("-" * 60)

    conn = sqlite3.connect(db_path)

    if table_exists(conn, "sample_results"):
        rows = conn.execute(
            """
            SELECT label, filename, total, markup, style, script, badge
            FROM sample_results
            ORDER BY total DESC, filename ASC
            """
        ).fetchall()

        if rows:
            print("Leaderboard:\n")
            for i, (label, filename, total, markup, style, script, badge) in enumerate(rows, 1):
                print(f"{i:2d}. {total:3d} {BADGE_LABELS.get(badge, badge):7s} | {label}")
                print(f"    {filename}  HTML {markup:3d}  CSS {style:3d}  JS {script:3d}")
        else:
            print("No rows in sample_results yet.")
    else:
        print("sample_results: (table missing)")

    if table_exists(conn, "load_log"):
        err_rows = conn.execute(
            """
            SELECT error, COUNT(*) cnt
            FROM load_log
            WHERE error IS NOT NULL AND error != ''
            GROUP BY error
            ORDER BY cnt DESC
            LIMIT 10
            """
        ).fetchall()
        if err_rows:
            print("\nTop load_log errors:")
            for err, cnt in err_rows:
                print(f"  {cnt:4d}  {err}")

    conn.close()
    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
