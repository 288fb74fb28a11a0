"""Hotels app package.

This app holds the hotel catalogue: the hotel and facility models, the
search filters and pagination, and the endpoints owners use to manage
their listings.
"""
