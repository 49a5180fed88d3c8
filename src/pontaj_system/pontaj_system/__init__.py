"""Pontaj (monthly work schedule) system package.

Organized by feature modules (users, businesses, employees, plans) with a thin
Flask controller layer over service/repository layers. The ``schedule``
subpackage holds the pure computation engine the services build on.
"""
