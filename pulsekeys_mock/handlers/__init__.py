"""Endpoint handlers, grouped by area.

Each handler takes the request and returns a JSON response. Handlers signal
bad input by raising ClientInputError; the dispatcher turns that into a 400.
"""
