"""
Cash for Trash Casework - Participant Case Management Service

A FastAPI-based service that tracks participant enrollment, work shifts,
gift-card payments, homework assignments and housing/employment outcomes.
"""

__version__ = "0.1.0"
