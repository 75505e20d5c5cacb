"""
Form-and-table view layer for the Inventory service.

Views are rendering-agnostic: they hold the state a table or form displays
and talk to the REST API through ``clients.api_client``.
"""
