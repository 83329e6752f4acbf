from datetime import date, timedelta

from fx_ecb import DateNotFoundError, FxEcb

print(FxEcb.__version__)  # 0.1.0

# Keep the downloaded feed for an hour
fx = FxEcb(precision=4, refresh_interval=3600)

# Every published day, keyed by date
history = fx.rates()
latest = max(history)
print(latest, history[latest].as_dict())
# => 2024-11-11 {'USD': 1.0745, 'JPY': 164.93, ...}

# A single day
print(fx.rate(latest).currencies)

# Cross-rate conversion, EUR is supported on either leg
print(fx.convert(100, "USD", "CHF", latest))
print(fx.convert(100, "EUR", "JPY", latest))

# Today is never published
try:
    fx.rate(date.today() + timedelta(days=1))
except DateNotFoundError as exc:
    print(exc)
