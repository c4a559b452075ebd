import json
import sqlite3
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components

from arbiter.rank import BADGE_LABELS, color_for


FRAME_WIDTHS = {
    "Desktop": "100%",
    "Tablet": "768px",
    "Mobile": "375px",
}

KIND_STYLE = {
    "positive": ("✅", st.success),
    "negative": ("❌", st.error),
    "neutral": ("➖", st.info),
}

COLOR_LABELS = {"high": "🟢", "med": "🟡", "low": "🔴"}


def pick_db(root: Path) -> Path:
    candidates = [root / "src" / "data" / "arena.sqlite", root / "data" / "arena.sqlite"]
    existing = [p for p in candidates if p.exists()]
    if not existing:
        raise FileNotFoundError("No arena.sqlite found")
    return sorted(existing, key=lambda p: p.stat().st_size, reverse=True)[0]


def json_list(x):
    if not x:
        return []
    try:
        v = json.loads(x)
        return v if isinstance(v, list) else []
    except json.JSONDecodeError:
        return []


def read_source(source: str | None) -> str | None:
    if not source or source.startswith(("http://", "https://")):
        return None
    p = Path(source)
    if not p.exists():
        return None
    return p.read_text(encoding="utf-8")


st.set_page_config(page_title="Sample Details", layout="wide")

root = Path(__file__).resolve().parents[3]  # pages/Details.py → ui → src → repo
db = pick_db(root)

params = st.query_params
filename = params.get("filename")

st.title("Sample details")

if not filename:
    st.warning("No filename provided. Go back to the leaderboard and click 'View'.")
    st.stop()

con = sqlite3.connect(db)
row = con.execute(
    """
    SELECT label, title, source, total, markup, style, script, badge, feedback_json, evaluated_at
    FROM sample_results
    WHERE filename = ?
    """,
    (filename,),
).fetchone()
con.close()

if not row:
    st.error("Sample not found in database.")
    st.stop()

label, title, source, total, markup, style, script, badge, feedback_json, evaluated_at = row

st.subheader(f"{COLOR_LABELS[color_for(total)]} {total} | {BADGE_LABELS.get(badge, badge)} | {label}")
st.caption(f"{filename} · {title or 'untitled'} · evaluated at {evaluated_at}")

c1, c2, c3 = st.columns(3)
c1.metric("HTML", markup)
c2.metric("CSS", style)
c3.metric("JS", script)

st.divider()
st.markdown("### Analysis log")
feedback = json_list(feedback_json)
if feedback:
    for item in feedback:
        icon, show = KIND_STYLE.get(item.get("kind"), ("•", st.write))
        show(f"{icon} {item.get('message', '')}")
else:
    st.info("No feedback stored for this sample.")

st.divider()
st.markdown("### Preview")
width_name = st.radio("Frame width", options=list(FRAME_WIDTHS), horizontal=True)
width = FRAME_WIDTHS[width_name]

if source and source.startswith(("http://", "https://")):
    components.html(
        f'<iframe src="{source}" style="width:{width};height:600px;border:0;"></iframe>',
        height=620,
    )
else:
    code = read_source(source)
    if code is None:
        st.info("Source document is not available for preview.")
    else:
        srcdoc = code.replace("&", "&amp;").replace('"', "&quot;")
        components.html(
            f'<iframe srcdoc="{srcdoc}" style="width:{width};height:600px;border:0;"></iframe>',
            height=620,
        )
        with st.expander("Source"):
            st.code(code, language="html")
