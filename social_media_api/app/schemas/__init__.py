"""
Pydantic schema definitions for API payloads.

``account`` and ``message`` each define the request bodies accepted
by the endpoints and the records returned by the repositories.
"""
