"""
Capacity Planner
================

Release capacity planning engine.

Derives engineer-availability estimates from release-plan milestones by
subtracting holidays, the annual hackathon and pro-rated vacation allowance
from the working days between milestones.
"""

__version__ = "0.1.0"
__author__ = "Capacity Planner"
