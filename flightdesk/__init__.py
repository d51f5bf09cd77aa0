"""
flightdesk: airports, aircraft and flights with derived flight metrics.

Flights are stored with a great-circle distance, the fuel they require and an
estimated flight time, all derived from the stored airport coordinates and
aircraft performance figures. The service layer also enforces the
referential rules between the three record types.
"""

__version__ = "0.1.0"
