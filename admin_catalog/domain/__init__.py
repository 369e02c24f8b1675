"""
Domain layer.

Holds the catalog aggregates (Category, Genre), their validation rules and
the error types they raise. Nothing in here knows about persistence or HTTP.
"""
