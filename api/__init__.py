"""
REST API surface for the Partner Entitlement Service.
"""
