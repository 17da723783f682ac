import html
import streamlit as st
from coinswap.ui.theme import THEME

def PrimaryButton(label: str, key: str, run=None, busy: str = "Running…"):
    if st.button(label, key=key, type="primary", use_container_width=True):
        with st.spinner(busy):
            if run:
                run()

def StatCard(title: str, value: str, help: str = ""):
    col1, col2 = st.columns([0.6, 0.4])
    with col1:
        st.markdown(f"**{title}**")
    shown = html.escape(value).replace("$", "&#36;")
    with col2:
        st.markdown(f"<div style='text-align:right; font-size:{THEME['font']['size']['xl']}px; font-weight:700;'>{shown}</div>", unsafe_allow_html=True)
    if help:
        st.caption(help.replace("$", "\\$"))

def ToneText(text: str, tone: str = "muted") -> str:
    color = THEME["color"].get(tone, THEME["color"]["muted"])
    return f"<span style='color:{color}; font-weight:600;'>{html.escape(text)}</span>"

def Badge(text: str, tone: str = "success"):
    color = THEME["color"].get(tone, THEME["color"]["muted"])
    st.markdown(
        f"<span style='background:{color}33; color:{color}; padding:6px 10px; border-radius:999px;'>{html.escape(text)}</span>",
        unsafe_allow_html=True
    )
