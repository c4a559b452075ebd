from __future__ import annotations

import sqlite3
import urllib.parse
from pathlib import Path

import pandas as pd
import streamlit as st

from arbiter.rank import BADGE_LABELS


def pick_db(root: Path) -> Path:
    candidates = [
        root / "src" / "data" / "arena.sqlite",
        root / "data" / "arena.sqlite",
    ]
    existing = [p for p in candidates if p.exists()]
    if not existing:
        raise FileNotFoundError("No arena.sqlite found in src/data or data. Run arbiter.run_arena first.")
    return sorted(existing, key=lambda p: p.stat().st_size, reverse=True)[0]


@st.cache_data(ttl=10)
def load_data(db_path: str) -> pd.DataFrame:
    con = sqlite3.connect(db_path)
    q = """
    SELECT
      filename,
      label,
      title,
      source,
      total,
      markup,
      style,
      script,
      badge,
      doc_length,
      evaluated_at
    FROM sample_results
    """
    df = pd.read_sql_query(q, con)
    con.close()

    for col in ["total", "markup", "style", "script", "doc_length"]:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0).astype(int)

    return df


def main() -> None:
    st.set_page_config(page_title="Code Battle Arbiter", layout="wide")

    root = Path(__file__).resolve().parents[2]
    db = pick_db(root)

    st.title("Code Battle Arbiter")
    st.caption(f"Database: {db}")

    df = load_data(str(db))

    st.sidebar.header("Filters")

    badge_filter = st.sidebar.multiselect(
        "Badge",
        options=["gold", "silver", "bronze"],
        default=[],
        format_func=lambda b: BADGE_LABELS.get(b, b),
    )
    if badge_filter:
        df = df[df["badge"].isin(badge_filter)]

    min_total = st.sidebar.slider("Minimum total", min_value=0, max_value=100, value=0)
    df = df[df["total"] >= min_total]

    search = st.sidebar.text_input("Search label/filename")
    if search.strip():
        s = search.strip().lower()
        df = df[
            df["label"].fillna("").str.lower().str.contains(s, na=False)
            | df["filename"].str.lower().str.contains(s, na=False)
        ]

    if df.empty:
        st.warning("No samples match your filters.")
        return

    df = df.sort_values(["total", "filename"], ascending=[False, True]).copy()
    df["rank"] = df["badge"].map(lambda b: BADGE_LABELS.get(b, b))
    df["details"] = df["filename"].apply(
        lambda f: f"/Details?filename={urllib.parse.quote(str(f), safe='')}"
    )

    c1, c2, c3 = st.columns(3)
    c1.metric("Samples", len(df))
    c2.metric("Best total", int(df["total"].max()))
    c3.metric("Average total", round(float(df["total"].mean()), 1))

    st.subheader("Leaderboard")

    cols = ["total", "rank", "label", "filename", "markup", "style", "script", "details"]
    cols = [c for c in cols if c in df.columns]

    st.data_editor(
        df[cols],
        use_container_width=True,
        height=420,
        disabled=True,
        hide_index=True,
        column_config={
            "total": st.column_config.NumberColumn("Total", format="%d"),
            "markup": st.column_config.ProgressColumn("HTML", min_value=0, max_value=100, format="%d"),
            "style": st.column_config.ProgressColumn("CSS", min_value=0, max_value=100, format="%d"),
            "script": st.column_config.ProgressColumn("JS", min_value=0, max_value=100, format="%d"),
            "details": st.column_config.LinkColumn(
                "Details",
                display_text="View demo & analysis",
                help="Open the feedback log and preview for this sample",
            ),
        },
    )

    st.info("Tip: click **View demo & analysis** to open the details page for a sample.")


if __name__ == "__main__":
    main()
