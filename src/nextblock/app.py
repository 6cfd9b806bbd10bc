"""NextBlock — Streamlit app for the sky above a given block height."""

import html
import logging
import os

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from nextblock.delta import InvalidHeightError, parse_height  # noqa: E402
from nextblock.i18n import t  # noqa: E402
from nextblock.models import Block  # noqa: E402
from nextblock.narrative import describe_block  # noqa: E402
from nextblock.renderers.plotly_2d import render_tide_chart  # noqa: E402
from nextblock.telescope import run  # noqa: E402

logging.basicConfig(level=os.environ.get("NEXTBLOCK_LOG_LEVEL", "WARNING").upper())

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in, at which point _lang is set correctly.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
if "telescope" not in st.session_state:
    st.session_state.telescope = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

# --- Dark theme CSS ---
st.markdown(
    """
    <style>
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #050a1a !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .overlay-box {
        background: rgba(0, 0, 0, 0.65);
        border-radius: 12px;
        padding: 1.2rem 1.6rem;
        color: #e8e8e8;
        margin-bottom: 0.5rem;
    }
    .readout-line {
        color: #d0d8e8;
        font-size: 1.05rem;
        line-height: 1.8;
        margin: 0;
    }
    label, [data-testid="stWidgetLabel"] p {
        color: #aaaaaa !important;
        font-size: 0.85rem !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Input bar ---
col1, col2, col3, col4 = st.columns([2, 2, 2, 1])
with col1:
    height_str = st.text_input(t("label_height", _lang), value="901152")
with col2:
    weight = st.number_input(t("label_weight", _lang), min_value=0, value=0, step=1000)
with col3:
    tx_count = st.number_input(t("label_tx_count", _lang), min_value=0, value=0, step=1)
with col4:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    submitted = st.button(t("btn_observe", _lang), use_container_width=True)

# --- Form submission handler ---
if submitted:
    st.session_state.error_msg = None
    try:
        st.session_state.telescope = run(
            Block(
                height=parse_height(height_str),
                weight=int(weight),
                tx_count=int(tx_count),
            )
        )
    except InvalidHeightError as e:
        st.session_state.telescope = None
        st.session_state.error_msg = t("error_height", _lang).format(error=e)

# --- Error message ---
if st.session_state.error_msg:
    st.markdown(
        f"<div class='overlay-box' style='border:1px solid #ff6b6b; color:#ff9999;'>"
        f"{html.escape(st.session_state.error_msg)}</div>",
        unsafe_allow_html=True,
    )

# --- Readout + chart ---
telescope = st.session_state.telescope
if telescope is None:
    st.markdown(
        f"<div style='height:40vh; display:flex; align-items:center; justify-content:center;"
        f" color:#334466; font-size:1.2rem;'>{t('placeholder', _lang)}</div>",
        unsafe_allow_html=True,
    )
else:
    lines = "".join(
        f"<p class='readout-line'>{html.escape(line)}</p>"
        for line in describe_block(telescope, _lang)
    )
    st.markdown(f"<div class='overlay-box'>{lines}</div>", unsafe_allow_html=True)
    st.plotly_chart(
        render_tide_chart(telescope),
        use_container_width=True,
        config={"scrollZoom": True, "displayModeBar": False},
    )
