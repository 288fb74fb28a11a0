"""Users app package.

Holds the email-based account model and the authentication endpoints that
issue the JWTs protecting booking and hotel management routes.
"""
