import html
import streamlit as st
from coinswap.calculator import format_price, format_profit, format_quantity, format_roi, tone
from coinswap.session import FETCHING, LOAD_FAILED, PRICE_MISSING, SwapSession
from coinswap.ui.widgets import Badge, PrimaryButton, StatCard, ToneText

LABELS = {"buy": "Buy coin", "sell": "Sell into"}
AMOUNT_KEY = "investment"

def _search_key(side): return f"{side}_search"
def _select_key(side): return f"{side}_coin"

def _money(text: str) -> str:
    # keep "$" away from Streamlit's LaTeX parser
    return text.replace("$", "&#36;")

# ---------- widget callbacks (run before the rerun) ----------
def _on_search(session: SwapSession, side):
    session.on_search_changed(side, st.session_state[_search_key(side)])

def _on_select(session: SwapSession, side):
    session.on_coin_selected(side, st.session_state[_select_key(side)])

def _on_amount(session: SwapSession):
    session.on_amount_changed(st.session_state[AMOUNT_KEY])

# ---------- pieces ----------
def _selector(session: SwapSession, side):
    state = session.sides[side]
    st.text_input(f"Search {side} coin", key=_search_key(side), placeholder="Name or symbol, e.g. btc",
                  on_change=_on_search, args=(session, side))
    # session is the source of truth for what the dropdown shows
    st.session_state[_select_key(side)] = state.selected
    st.selectbox(LABELS[side], state.option_ids, key=_select_key(side),
                 format_func=session.catalog.label, placeholder="No coins match",
                 on_change=_on_select, args=(session, side))
    st.caption(f"{len(state.options)} of {len(session.catalog)} coins")

def _message(msg: str):
    if msg == LOAD_FAILED or msg.startswith("Error"):
        st.error(msg)
    elif msg == PRICE_MISSING or msg.startswith("Please"):
        st.warning(msg)
    else:
        st.info(msg)

def _result(session: SwapSession):
    out = session.outcome
    if out is None:
        if session.message:
            _message(session.message)
        return
    r = out.result
    buy_label = html.escape(session.catalog.label(out.buy.coin_id))
    sell_label = html.escape(session.catalog.label(out.sell.coin_id))
    st.markdown(_money(
        f"<div>Bought <strong>{format_quantity(r.quantity)}</strong> {buy_label} "
        f"at <strong>${format_price(out.buy.usd_price)}</strong> each.<br>"
        f"Sold at <strong>${format_price(out.sell.usd_price)}</strong> ({sell_label}).<br>"
        f"Profit/Loss: {ToneText(format_profit(r.profit), tone(r.profit))}<br>"
        f"ROI: {ToneText(format_roi(r.roi_percent), tone(r.roi_percent))}</div>"
    ), unsafe_allow_html=True)
    st.divider()
    StatCard("Final value", f"${r.final_value:,.2f}", f"Invested ${out.investment:,.2f}")

def view(session: SwapSession, theme):
    st.subheader("Coin Swap Calculator")
    Badge("Live prices: CoinGecko (public API)", "success" if len(session.catalog) else "warning")
    st.write("")

    st.number_input("Investment amount (USD)", value=None, step=100.0, format="%.2f",
                    placeholder="e.g. 1000", key=AMOUNT_KEY, on_change=_on_amount, args=(session,))

    colA, colB = st.columns(2)
    with colA:
        _selector(session, "buy")
    with colB:
        _selector(session, "sell")

    def _do_calculate():
        session.on_amount_changed(st.session_state.get(AMOUNT_KEY))
        session.on_calculate()
    PrimaryButton("Calculate", key="calculate", run=_do_calculate, busy=FETCHING)

    _result(session)

    with st.expander("Browse coin list", expanded=False):
        st.caption("Follows the buy-side search. Ranked by market cap.")
        st.dataframe(session.catalog.to_frame(session.sides["buy"].options),
                     hide_index=True, use_container_width=True)
