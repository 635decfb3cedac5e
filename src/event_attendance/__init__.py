"""Event attendance package.

Organized by feature modules (users, events, attendance, metrics, export) with a thin
Flask controller layer over service/repository layers.
"""
