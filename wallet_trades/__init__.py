"""
wallet_trades: trading history reconstruction for a Solana wallet.

Pulls the enhanced transaction feed for an address, classifies how each
transaction was executed, nets the wallet's SOL and token flows, and derives
an implied SOL price for one tracked mint.
"""

__version__ = "0.1.0"
