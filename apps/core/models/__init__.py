"""
Flight Information Models

Database models for flight records and the shared status vocabulary.
"""

from .flight import Flight, FlightQuerySet, FlightStatus, airline_search_key

__all__ = [
    'Flight',
    'FlightQuerySet',
    'FlightStatus',
    'airline_search_key',
]
