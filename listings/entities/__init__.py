"""
Listing data model.

Responsibilities:
- Define the shared ``BusinessEntity`` shape and one model per catalog variant.
- Read localized fields with a fixed fallback chain (requested locale, English, placeholder).
- Order listings with the stable featured / rating / price / name sorts.
"""
