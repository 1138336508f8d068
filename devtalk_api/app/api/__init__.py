"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` which includes all
of its resource endpoints.  A REST API is organised by entity, so
every resource gets its own path under ``/api/<version>/<entity>``.
"""
