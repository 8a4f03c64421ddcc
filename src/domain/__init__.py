"""
Domain layer for mail handling.

This layer contains:
- Data models (immutable mail items)
- Result types (explicit accept/reject handling)
- The mail worker pipeline
"""
