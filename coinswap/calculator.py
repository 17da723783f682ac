"""
Return calculator: buy one coin with a USD amount, sell the lot into the
other coin's USD price, report what came out.

Division follows IEEE-754, so a zero buy price gives an infinite (or NaN)
quantity instead of raising.
"""
from __future__ import annotations
import math
import re
from decimal import Decimal
from coinswap.models import CalculationResult
from coinswap.utils.errors import InvalidInput

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b

def compute(investment: float, buy_price: float, sell_price: float) -> CalculationResult:
    quantity = _div(investment, buy_price)
    final_value = quantity * sell_price
    profit = final_value - investment
    roi_percent = _div(profit, investment) * 100
    return CalculationResult(quantity=quantity, final_value=final_value,
                             profit=profit, roi_percent=roi_percent)

def parse_amount(raw) -> float | None:
    """Lenient number read: floats pass through, text keeps its leading number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    m = _LEADING_NUMBER.match(str(raw))
    return float(m.group(1)) if m else None

def validate_investment(raw) -> float:
    amount = parse_amount(raw)
    if amount is None or not math.isfinite(amount) or amount <= 0:
        raise InvalidInput("Please enter a valid investment amount.")
    return amount

def validate_pair(buy_coin_id: str | None, sell_coin_id: str | None) -> tuple[str, str]:
    if not buy_coin_id or not sell_coin_id:
        raise InvalidInput("Please select both buy and sell coins.")
    return buy_coin_id, sell_coin_id

# ---------- formatting ----------
def format_profit(profit: float) -> str:
    return f"+${profit:.2f}" if profit >= 0 else f"-${abs(profit):.2f}"

def format_roi(roi_percent: float) -> str:
    return f"+{roi_percent:.2f}%" if roi_percent >= 0 else f"{roi_percent:.2f}%"

def format_quantity(quantity: float) -> str:
    return f"{quantity:.6f}"

def format_price(price: float) -> str:
    """Shortest round-trip digits, positional between 1e-6 and 1e21 like a browser prints them."""
    price = float(price)
    if not math.isfinite(price):
        return repr(price)
    if price == 0:
        return "0"
    if 1e-6 <= abs(price) < 1e21:
        text = format(Decimal(repr(price)), "f")
        return text.rstrip("0").rstrip(".") if "." in text else text
    mantissa, _, exp = repr(price).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return f"{mantissa}e{int(exp):+d}"

def tone(value: float) -> str:
    return "success" if value >= 0 else "danger"
