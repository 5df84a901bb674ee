"""Streamlit UI for the Eisenhower board."""

from __future__ import annotations

import json

from eisenhower_board.board import bucket_of
from eisenhower_board.schema import BUCKET_LABELS, QUADRANTS
from eisenhower_board.session import BoardSession
from eisenhower_board.summary import summarize

_SESSION_KEY = "board_session"
_QUADRANT_COLORS = {
    "Important & Urgent": "#bbf7d0",
    "Important & Not Urgent": "#fef08a",
    "Unimportant & Urgent": "#bfdbfe",
    "Unimportant & Not Urgent": "#fecaca",
}


def copy_button_html(text: str) -> str:
    """Build a button that copies ``text`` with the browser clipboard API."""

    payload = json.dumps(text).replace("</", "<\\/")
    return f"""
<button id="copy" style="width:100%;padding:0.6rem;border:none;border-radius:8px;background:#2563eb;color:#fff;font-weight:500;cursor:pointer">
  Copy to Clipboard
</button>
<script>
document.getElementById("copy").addEventListener("click", function () {{
  if (navigator.clipboard) {{
    navigator.clipboard.writeText({payload})
      .then(function () {{ alert("Organized tasks copied to clipboard!"); }})
      .catch(function (error) {{ console.error("Failed to copy to clipboard:", error); }});
  }}
}});
</script>
"""


def _session(state) -> BoardSession:
    if _SESSION_KEY not in state:
        state[_SESSION_KEY] = BoardSession()
    return state[_SESSION_KEY]


def _on_submit(state) -> None:
    _session(state).submit(state.get("new_tasks", ""))
    state["new_tasks"] = ""


def _item(task) -> str:
    return f"{task.id}:: {task.content}"


def sortable_containers(session: BoardSession) -> list[dict]:
    """One draggable container per quadrant, items keyed by task id."""

    return [
        {
            "header": f"{quadrant.action} · {quadrant.label}",
            "items": [_item(task) for task in session.state.buckets[quadrant.label]],
        }
        for quadrant in QUADRANTS
    ]


def board_key(session: BoardSession) -> str:
    """Widget key that changes with the placement, so a stale drag result is never replayed."""

    placement = tuple(tuple(task.id for task in session.state.buckets[label]) for label in BUCKET_LABELS)
    return f"matrix_{hash(placement)}"


def apply_drag(session: BoardSession, containers: list[dict]) -> list[int]:
    """Forward every card that landed in another quadrant as a drop; return the moved ids."""

    moved = []
    for quadrant, container in zip(QUADRANTS, containers):
        for item in container["items"]:
            task_id = item.split("::", 1)[0]
            if bucket_of(session.state, task_id) == quadrant.label:
                continue
            if session.drop(task_id, quadrant.label):
                moved.append(int(task_id))
    return moved


def _render_matrix(st, sort_items, session: BoardSession) -> None:
    top = st.columns(2)
    bottom = st.columns(2)
    for container, quadrant in zip([*top, *bottom], QUADRANTS):
        color = _QUADRANT_COLORS[quadrant.label]
        container.markdown(
            f"<div style='background:{color};border-radius:8px;padding:0.5rem;text-align:center'>"
            f"<h3 style='margin:0'>{quadrant.action}</h3>"
            f"<small>{quadrant.label}: {quadrant.hint}</small></div>",
            unsafe_allow_html=True,
        )

    st.caption("Drag tasks between quadrants.")
    containers = sort_items(
        sortable_containers(session),
        multi_containers=True,
        direction="vertical",
        key=board_key(session),
    )
    if apply_drag(session, containers):
        st.rerun()


def main() -> None:
    import streamlit as st
    import streamlit.components.v1 as components
    from streamlit_sortables import sort_items

    st.set_page_config(page_title="Organize My Tasks", layout="wide")
    st.title("Organize My Tasks")
    st.write(
        "Organize your tasks efficiently using the Eisenhower Matrix. "
        "Focus on what's important and maximize your productivity."
    )

    session = _session(st.session_state)

    st.subheader("Step 1: Enter Your Tasks")
    st.text_area("Tasks", key="new_tasks", height=120, placeholder="Enter tasks (one per line)...")
    st.button("Add Tasks", type="primary", on_click=_on_submit, args=(st.session_state,))

    stats = summarize(session.state.buckets)
    cols = st.columns(len(QUADRANTS))
    for col, quadrant in zip(cols, QUADRANTS):
        col.metric(quadrant.action, stats["counts"][quadrant.label])

    _render_matrix(st, sort_items, session)

    st.subheader("Organized Tasks")
    st.text_area("Summary", value=session.summary, height=220, disabled=True)
    components.html(copy_button_html(session.summary), height=60)

    if st.button("Start over"):
        session.reset()
        st.rerun()


if __name__ == "__main__":
    main()
