"""
Version 1 of the API.

This subpackage bundles the employee endpoints of the first public
version of the Employee Registry API.
"""
