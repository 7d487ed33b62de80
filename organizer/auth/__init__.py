"""
Organizer API - Authentication Module

Credential checks, account creation and bearer-token validation.
"""
