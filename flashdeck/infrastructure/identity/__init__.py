"""
Identity adapter.

Users and credentials live with an external identity provider; this package
only turns a bearer access token into the caller's UserId.
"""
