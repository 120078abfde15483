"""Routing — named URI templates turned into concrete paths.

Templates are parsed into placeholder names, parameters are validated
against those names, substituted, and finally composed with a query
string and base URL. The registry wires the stages together.
"""
