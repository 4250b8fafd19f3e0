"""
Reference data and value objects module.

Static currency, pair and lot-size tables plus parsing and
serialization helpers shared by every calculator.
"""
