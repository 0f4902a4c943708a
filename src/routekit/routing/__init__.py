"""Routing — declare routes now, bind them to a server later.

Registrations are normalized into frozen ``RouteSpec`` values, stored
per method in a ``RouteTable``, and applied to an external server
under an optional mount prefix.
"""
