"""
Partners module - Partner entitlement records and policy resolution.

This module handles:
- Partner, ApiKey, Policy and MispLicense records and their mapping
- Policy resolution for (partner, API key, MISP license key)
- Synchronization of records from lifecycle events
"""
