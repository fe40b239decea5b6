# app.py
import html
import logging

import numpy as np
import streamlit as st

from draw_core.catalog import loader_from_config
from draw_core.config import (
    ensure_assets_exist,
    load_settings_or_default,
    resolved_catalog_url,
    ui_css,
)
from draw_core.constants import ERROR, IDLE, LOADING, READY
from draw_core.export import assignment_csv_bytes, assignment_to_df, render_pdf
from draw_core.session import DrawSession
from draw_core.storage import JsonFileRosterStore


# ---------- Page & Theme ----------
st.set_page_config(page_title="Champion Draw", layout="centered")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_assets_exist()


# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    if "app_config" not in ss:
        ss.app_config, ss.config_error = load_settings_or_default()
        logging.basicConfig(
            level=ss.app_config.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    if "draw" not in ss:
        cfg = ss.app_config
        rng = np.random.default_rng(cfg.random_seed)
        store = JsonFileRosterStore(cfg.storage_path, key=cfg.storage_key)
        ss.draw = DrawSession(store, max_roster=cfg.max_roster, rng=rng)
    ss.setdefault("name_input", "")

_init_state()

session: DrawSession = st.session_state.draw
cfg = st.session_state.app_config


def _load_catalog():
    with st.spinner("Loading champions..."):
        session.load_catalog(loader_from_config(cfg))

# initial load happens once per browser session
if session.load_state == IDLE:
    _load_catalog()


# ---------- Callbacks (run before the next render) ----------
def _on_add():
    result = session.submit_name(st.session_state.name_input)
    if result.ok:
        st.session_state.name_input = ""

def _on_remove(name: str):
    session.remove_member(name)

def _on_randomize():
    session.randomize()


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Catalog")
    badge = session.load_state
    if session.load_state == READY:
        badge = f"Ready — {len(session.catalog)} champions"
    st.markdown(f'<div class="badge">{html.escape(badge)}</div>', unsafe_allow_html=True)
    if cfg.catalog_path:
        st.caption(f"Source: {cfg.catalog_path}")
    else:
        st.caption(f"Source: {resolved_catalog_url(cfg)}")
    if st.button("Reload champions", use_container_width=True,
                 disabled=session.load_state == LOADING):
        _load_catalog()
        st.rerun()
    if session.load_state == ERROR:
        st.warning("Catalog unavailable. Reload to try again.")


# ---------- Header ----------
st.markdown(
    """
<div class="card section" style="text-align:center">
  <h2>Champion Draw</h2>
  <div class="small">Add up to five players, then draw a random champion for each.</div>
</div>
""",
    unsafe_allow_html=True,
)


# ---------- Roster input (Enter or Add submits) ----------
with st.form("add_player", border=False):
    st.text_input("Player name", key="name_input", max_chars=40)
    st.form_submit_button(
        "Add",
        type="primary",
        use_container_width=True,
        disabled=session.roster_manager.is_full,
        on_click=_on_add,
    )

st.button(
    "Randomize",
    use_container_width=True,
    disabled=not session.can_randomize,
    on_click=_on_randomize,
)

if st.session_state.config_error:
    st.warning(st.session_state.config_error)
if session.error_message:
    st.error(session.error_message)


# ---------- Roster chips ----------
if session.roster:
    st.subheader("Players added:")
    cols = st.columns(len(session.roster))
    for i, member in enumerate(session.roster):
        with cols[i]:
            st.button(
                f"✕ {member}",
                key=f"chip_{i}_{member}",
                use_container_width=True,
                on_click=_on_remove,
                args=(member,),
                help=f"Remove {member}",
            )


# ---------- Results ----------
if session.assignment:
    st.subheader("Drawn champions:")
    cards = []
    for player, champion in session.assignment.items():
        cards.append(
            '<div class="result"><div class="player">{p}</div><div class="champion">{c}</div></div>'.format(
                p=html.escape(player), c=html.escape(champion)
            )
        )
    st.markdown(f'<div class="row">{"".join(cards)}</div>', unsafe_allow_html=True)

    df = assignment_to_df(session.assignment, session.roster)
    st.markdown("---")
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Download CSV",
            data=assignment_csv_bytes(df),
            file_name="champion_draw.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col2:
        st.download_button(
            "Download PDF",
            data=render_pdf(df),
            file_name="champion_draw.pdf",
            mime="application/pdf",
            use_container_width=True,
        )
