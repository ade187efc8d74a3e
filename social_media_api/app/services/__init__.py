"""
Service layer abstraction.

Each service encapsulates the rules for a domain (accounts, messages)
and delegates storage to the matching repository.  API handlers only
talk to services.
"""
