"""
Infrastructure Layer
====================

Concrete persistence implementations (MongoDB).
"""
