"""
API v1 Helper Functions

Shared helper functions extracted from endpoint modules for better
code organization and reusability.
"""
