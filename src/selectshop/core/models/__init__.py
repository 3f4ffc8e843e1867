"""Pydantic models exchanged with the service layer."""
