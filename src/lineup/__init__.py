"""
Ágora LineUp: digital-signage scheduling.

Projects a venue's events onto month calendars for the admin panel and onto
live weekly agendas for each display screen.
"""

__version__ = "0.1.0"
