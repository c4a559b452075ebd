import csv
import sqlite3
from pathlib import Path

DB = "src/data/arena.sqlite"
OUT = "src/data/results.csv"

Path("src/data").mkdir(exist_ok=True)

con = sqlite3.connect(DB)
rows = con.execute(
    """
    select filename, label, total, markup, style, script, badge, evaluated_at
    from sample_results
    order by total desc, filename asc
    """
).fetchall()
con.close()

with open(OUT, "w", newline="", encoding="utf-8") as f:
    w = csv.writer(f)
    w.writerow(["filename", "label", "total", "markup", "style", "script", "badge", "evaluated_at"])
    w.writerows(rows)

print(f"Wrote {len(rows)} rows to {OUT}")
