"""
Inventory service: suppliers and the inventory items they own.
"""
