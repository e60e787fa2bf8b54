"""Application layer: API client, membership model and context persistence.

UI packages import from :mod:`sumup_app.api`.
"""
