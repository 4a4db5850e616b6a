PERP_TRADE_TEMPLATE = """Look at your LAST RESPONSE in the conversation where you confirmed a trade request.
Based on ONLY that last message, extract the trading details:

For DESK Exchange perp trading:
- Market orders (executes immediately at best available price):
  "perp buy 1 HYPE" -> {{ "symbol": "HYPE", "side": "Long", "amount": "1" }}
  "perp sell 2 HYPE" -> {{ "symbol": "HYPE", "side": "Short", "amount": "2" }}
  "perp market buy 1 HYPE" -> {{ "symbol": "HYPE", "side": "Long", "amount": "1" }}
  "perp market sell 2 HYPE" -> {{ "symbol": "HYPE", "side": "Short", "amount": "2" }}

- Limit orders (waits for specified price):
  "buy 1 HYPE at 20 USDC" -> {{ "symbol": "HYPE", "side": "Long", "amount": "1", "price": "20" }}
  "sell 0.5 HYPE at 21 USDC" -> {{ "symbol": "HYPE", "side": "Short", "amount": "0.5", "price": "21" }}
  "limit buy 1 HYPE at 20 USDC" -> {{ "symbol": "HYPE", "side": "Long", "amount": "1", "price": "20" }}
  "limit sell 0.5 HYPE at 21 USDC" -> {{ "symbol": "HYPE", "side": "Short", "amount": "0.5", "price": "21" }}

```json
{{
    "symbol": "<coin symbol>",
    "side": "<Long for buy, Short for sell>",
    "amount": "<quantity to trade>",
    "price": "<price in USD if limit order, 0 if market order>"
}}
```

Note:
- Just use the coin symbol (HYPE, ETH, etc.)
- price is optional:
  - If specified (with "at X USD"), order will be placed at that exact price
  - If not specified, order will be placed at current market price
- Words like "market" or "limit" at the start are optional but help clarify intent

Recent conversation:
{recent_messages}"""
