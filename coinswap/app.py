# coinswap/app.py  (run with: streamlit run coinswap/app.py)
from __future__ import annotations
import streamlit as st

BRAND = "COIN SWAP CALCULATOR"

# ✅ MUST be the first Streamlit call:
st.set_page_config(
    page_title=f"{BRAND} — Returns",
    page_icon="⚡",
    layout="centered",
    initial_sidebar_state="expanded",
)

# Import AFTER set_page_config; these modules do NOT call st.* at import time
from coinswap import __version__  # noqa: E402
from coinswap.data_sources.crypto_feed import CoinGeckoClient  # noqa: E402
from coinswap.views import calculator  # noqa: E402
from coinswap.session import SwapSession  # noqa: E402
from coinswap.ui.theme import THEME  # noqa: E402
from coinswap.utils.log import get_logger  # noqa: E402

log = get_logger("coinswap.app")

SESSION_KEY = "swap_session"

def get_session() -> SwapSession:
    # one owned session object per browser tab, built on first run
    if SESSION_KEY not in st.session_state:
        log.info("new browser session")
        st.session_state[SESSION_KEY] = SwapSession(CoinGeckoClient())
    return st.session_state[SESSION_KEY]

session = get_session()
if not session.started:
    with st.spinner("Loading top coins…"):
        session.start()

# Sidebar
st.sidebar.title(BRAND)
st.sidebar.caption(f"Buy one, sell into another • v{__version__}")
st.sidebar.markdown("---")
eng = session.engine.snapshot()
st.sidebar.metric("Engine", eng["state"])
if eng["last_action"]:
    st.sidebar.caption(f"Last: {eng['last_action']} · {eng['last_ms']} ms · {'ok' if eng['last_ok'] else 'failed'}")
st.sidebar.metric("Coins loaded", len(session.catalog))
st.sidebar.button("Refresh coin list", on_click=session.reload, use_container_width=True)

calculator.view(session, THEME)
