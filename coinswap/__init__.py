"""
Coin swap return calculator.

Pick a coin to buy, a coin to sell into, an amount in USD, and see the
simulated profit/loss at live CoinGecko prices.
"""

__version__ = "1.0.0"
