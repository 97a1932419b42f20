"""
Custom Exceptions Module

This module defines the exception hierarchy for the DBAP panning code,
providing more specific error types for better error handling.
"""

class DBAPError(Exception):
    """Base exception class for all DBAP errors."""
    pass


class EmptyInputError(DBAPError, ValueError):
    """A gain computation was requested for an empty speaker collection."""
    pass


class ConfigurationError(DBAPError):
    """Error in panning configuration."""
    pass


class ValidationError(DBAPError):
    """Error during parameter validation."""
    pass


class MathError(DBAPError):
    """Error in mathematical calculations."""
    
    class DomainError(DBAPError):
        """Error due to input values outside the valid domain."""
        pass
