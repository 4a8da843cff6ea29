"""Greeting service package.

Holds the domain entity, the use case and the HTTP interface of the service.
The ASGI application itself is assembled in the root ``main`` module.
"""
