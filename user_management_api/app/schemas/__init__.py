"""
Pydantic schema definitions for API payloads.

``user`` holds the request and response models for user records and
``response`` the envelope every endpoint answers with.
"""
